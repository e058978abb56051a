"""
Spreadsheet reader for bulk uploads.

Only the first sheet is read. Its header row must name the columns
key, english and arabic (any case); other columns are ignored.
"""

from pathlib import Path

import pandas as pd

from tarjama.errors import ProcessingError

COLUMNS = ("key", "english", "arabic")
EXCEL_SUFFIXES = (".xlsx", ".xlsm")


def read_sheet_rows(path: str | Path, filename: str | None = None) -> list[dict[str, str]]:
    """
    Read spreadsheet rows as dicts.

    Args:
        path: File on disk (.xlsx, .xlsm or .csv)
        filename: Original upload name, used to pick the reader when the
            temporary path has no useful suffix

    Returns:
        One dict per data row with key/english/arabic as strings ("" for blanks)

    Raises:
        ProcessingError: unsupported file type, unreadable content, or a
            header row with the same column name twice
    """
    name = filename or str(path)
    suffix = Path(name).suffix.lower()
    if suffix != ".csv" and suffix not in EXCEL_SUFFIXES:
        raise ProcessingError(f"Unsupported file type for {name}. Use .xlsx or .csv")

    try:
        if suffix == ".csv":
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(path, sheet_name=0, dtype=str, engine="openpyxl")

        df.columns = [str(c).strip().lower() for c in df.columns]
        if df.columns.duplicated().any():
            raise ProcessingError(f"Duplicate column names in {name}")

        df = df.reindex(columns=list(COLUMNS)).fillna("")
    except ProcessingError:
        raise
    except Exception as e:
        raise ProcessingError(f"Could not parse spreadsheet {name}") from e

    return [
        {column: str(row[column]).strip() for column in COLUMNS}
        for row in df.to_dict(orient="records")
    ]
