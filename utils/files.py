"""File utilities for upload validation and temporary storage.

`validate_file` enforces size and type; `upload_path` gives each upload a
collision-free name inside the upload directory.
"""
import uuid
from pathlib import Path
from fastapi import HTTPException

from configuration import ALLOWED_EXTENSIONS, MAX_FILE_SIZE_BYTES, MAX_FILE_SIZE_MB, UPLOAD_DIR


def validate_file(filename: str, file_size: int) -> None:
    file_path = Path(filename)
    if file_path.suffix.lower() not in ALLOWED_EXTENSIONS:
        raise HTTPException(400, "Invalid file type. Only PDF, Word, and text files are allowed.")
    if file_size > MAX_FILE_SIZE_BYTES:
        raise HTTPException(400, f"File exceeds {MAX_FILE_SIZE_MB}MB limit")


def upload_path(filename: str, upload_dir: Path = UPLOAD_DIR) -> Path:
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir / f"{uuid.uuid4()}-{Path(filename).name}"
