import logging
import os
import shutil
import uuid
from contextlib import contextmanager
from typing import Iterator

from fastapi import UploadFile

logger = logging.getLogger(__name__)


def save_temp_file(upload_file: UploadFile, upload_dir: str) -> str:
    """Store the upload under upload_dir with a unique name."""
    os.makedirs(upload_dir, exist_ok=True)
    ext = os.path.splitext(upload_file.filename or "")[1]
    path = os.path.join(upload_dir, f"{uuid.uuid4().hex}{ext}")
    try:
        with open(path, "wb") as f:
            shutil.copyfileobj(upload_file.file, f)
    except BaseException:
        # partial writes are removed before the error propagates
        cleanup_temp_file(path)
        raise
    return path


def cleanup_temp_file(file_path: str) -> None:
    try:
        if os.path.exists(file_path):
            os.unlink(file_path)
    except OSError as e:
        logger.warning("Failed to delete temp file %s: %s", file_path, e)


@contextmanager
def stored_upload(upload_file: UploadFile, upload_dir: str) -> Iterator[str]:
    """Yield the stored file path; the file is removed on every exit path."""
    path = save_temp_file(upload_file, upload_dir)
    try:
        yield path
    finally:
        cleanup_temp_file(path)
