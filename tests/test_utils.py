import io
import json

import pandas as pd
import pytest
from fastapi import UploadFile

from tarjama.errors import ProcessingError
from tarjama.utils import parse_tags, read_json_mapping, read_sheet_rows, saved_upload


def test_parse_tags():
    assert parse_tags(None) == []
    assert parse_tags("") == []
    assert parse_tags("a, b,,a") == ["a", "b"]


def test_read_json_mapping(tmp_path):
    path = tmp_path / "en.json"
    path.write_text(json.dumps({"a": "Ay"}), encoding="utf-8")
    assert read_json_mapping(path) == {"a": "Ay"}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_read_json_mapping_rejects_bad_content(tmp_path, content):
    path = tmp_path / "en.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ProcessingError):
        read_json_mapping(path)


def test_read_sheet_rows_xlsx(tmp_path):
    path = tmp_path / "sheet.xlsx"
    pd.DataFrame(
        [
            {"key": "a", "english": "Ay", "arabic": "أ", "note": "x"},
            {"key": "b", "english": "Bee", "arabic": None, "note": "y"},
        ]
    ).to_excel(path, index=False)

    assert read_sheet_rows(path) == [
        {"key": "a", "english": "Ay", "arabic": "أ"},
        {"key": "b", "english": "Bee", "arabic": ""},
    ]


def test_read_sheet_rows_csv(tmp_path):
    path = tmp_path / "upload.tmp"
    path.write_text("Key,English,Arabic\na,Ay,أ\n", encoding="utf-8")

    assert read_sheet_rows(path, "terms.csv") == [{"key": "a", "english": "Ay", "arabic": "أ"}]


def test_read_sheet_rows_rejects_garbage(tmp_path):
    path = tmp_path / "sheet.xlsx"
    path.write_bytes(b"definitely not a workbook")
    with pytest.raises(ProcessingError):
        read_sheet_rows(path)


def test_saved_upload_removed_after_error(tmp_path):
    upload = UploadFile(file=io.BytesIO(b"{}"), filename="en.json")
    seen = []

    with pytest.raises(RuntimeError):
        with saved_upload(upload, tmp_path / "uploads") as path:
            seen.append(path)
            assert path.read_bytes() == b"{}"
            assert path.suffix == ".json"
            raise RuntimeError("boom")

    assert not seen[0].exists()


def test_read_sheet_rows_rejects_xls(tmp_path):
    path = tmp_path / "upload.tmp"
    path.write_bytes(b"\xd0\xcf\x11\xe0")
    with pytest.raises(ProcessingError, match="Unsupported file type"):
        read_sheet_rows(path, "terms.xls")


def test_read_sheet_rows_rejects_repeated_header(tmp_path):
    path = tmp_path / "sheet.xlsx"
    pd.DataFrame(
        [{"key": "a", "Key": "b", "english": "Ay", "arabic": "أ"}]
    ).to_excel(path, index=False)

    with pytest.raises(ProcessingError, match="Duplicate column names"):
        read_sheet_rows(path)
