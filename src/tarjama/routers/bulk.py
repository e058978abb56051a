# routers/bulk.py
"""
Bulk ingestion routes.

All three routes feed the same merge: the upload routes read their
payload from temporary files (removed afterwards), /bulk-update takes
the two mappings straight from the request body.
"""

from fastapi import APIRouter, Depends, File, Request, UploadFile
from pydantic import ValidationError

from tarjama.errors import ProcessingError
from tarjama.merge import MergeEngine
from tarjama.models import BulkUpdateRequest
from tarjama.utils import parse_tags, read_json_mapping, read_sheet_rows, saved_upload

from ._base import commit_merge, get_engine, get_upload_dir

router = APIRouter()


@router.post("/upload-json")
async def upload_json(
    englishJson: UploadFile = File(...),
    arabicJson: UploadFile = File(...),
    tags: str | None = None,
    engine: MergeEngine = Depends(get_engine),
    upload_dir: str = Depends(get_upload_dir),
):
    """Merge an English and an Arabic key->text JSON file."""
    with saved_upload(englishJson, upload_dir) as english_path, \
            saved_upload(arabicJson, upload_dir) as arabic_path:
        try:
            english = read_json_mapping(english_path)
            arabic = read_json_mapping(arabic_path)
            result = engine.merge_mappings(english, arabic, parse_tags(tags))
        except ProcessingError as e:
            print(f"⚠️ JSON upload failed: {e}")
            raise ProcessingError("Failed to process the files.") from e

        return commit_merge(engine.store, result)


@router.post("/upload-excel")
async def upload_excel(
    excelFile: UploadFile = File(...),
    tags: str | None = None,
    engine: MergeEngine = Depends(get_engine),
    upload_dir: str = Depends(get_upload_dir),
):
    """Merge the first sheet of a spreadsheet with key/english/arabic columns."""
    with saved_upload(excelFile, upload_dir) as path:
        try:
            rows = read_sheet_rows(path, excelFile.filename)
        except ProcessingError as e:
            print(f"⚠️ Spreadsheet upload failed: {e}")
            raise ProcessingError("Failed to process the Excel file.") from e

        result = engine.merge_rows(rows, parse_tags(tags))
        return commit_merge(engine.store, result)


@router.post("/bulk-update")
async def bulk_update(
    request: Request,
    engine: MergeEngine = Depends(get_engine),
):
    """Merge {englishJson, arabicJson, tags} sent as the request body."""
    try:
        payload = await request.json()
        body = BulkUpdateRequest.model_validate(payload)
        result = engine.merge_mappings(body.englishJson, body.arabicJson, body.tags or [])
    except (ValueError, ValidationError, ProcessingError) as e:
        print(f"⚠️ Bulk update failed: {e}")
        raise ProcessingError("Failed to process the JSON data.") from e

    return commit_merge(engine.store, result)
