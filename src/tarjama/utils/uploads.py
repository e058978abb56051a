"""
Temporary materialization of uploaded files.
"""

import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import UploadFile


@contextmanager
def saved_upload(upload: UploadFile, upload_dir: str | Path) -> Iterator[Path]:
    """
    Copy an upload to a temporary file and remove it when the block exits.

    The file is deleted on every exit path, including errors raised while
    processing it.

    Args:
        upload: Incoming multipart file
        upload_dir: Directory for temporary copies (created if missing)

    Yields:
        Path of the temporary copy
    """
    Path(upload_dir).mkdir(parents=True, exist_ok=True)
    suffix = Path(upload.filename or "").suffix

    fd, name = tempfile.mkstemp(dir=upload_dir, suffix=suffix)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as out:
            upload.file.seek(0)
            shutil.copyfileobj(upload.file, out)
        yield path
    finally:
        path.unlink(missing_ok=True)
