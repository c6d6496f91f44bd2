"""On-disk storage for uploaded documents.

Files live in one flat directory. Each stored name is
``<upload-epoch-millis>-<original-name>``; the database row only keeps
metadata and the public ``/uploads/<stored-name>`` URL.
"""
import mimetypes
import os
import time
from pathlib import Path
from typing import Optional

import aiofiles
from decouple import config
from fastapi import UploadFile

UPLOAD_DIR = config("UPLOAD_DIR", default="uploads")
UPLOAD_URL_PREFIX = "/uploads"

CONTENT_TYPES = {
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "txt": "text/plain",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def upload_dir() -> Path:
    return Path(UPLOAD_DIR)


def safe_original_name(filename: str) -> str:
    """Reduce a client-supplied name to its final path component."""
    name = Path(filename.replace("\\", "/")).name
    return name or "upload"


def stored_name_for(original_name: str, now_ms: Optional[int] = None) -> str:
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{timestamp}-{safe_original_name(original_name)}"


def content_type_for(filename: str) -> str:
    """Content type served for a stored file, from its extension."""
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def guess_upload_mime_type(file: UploadFile) -> str:
    return file.content_type or mimetypes.guess_type(file.filename)[0] or DEFAULT_CONTENT_TYPE


async def save_upload(file: UploadFile) -> tuple[str, int]:
    """Write an upload to the storage directory; returns the stored name and size."""
    directory = upload_dir()
    os.makedirs(directory, exist_ok=True)

    stored_name = stored_name_for(file.filename)
    content = await file.read()
    async with aiofiles.open(directory / stored_name, "wb") as f:
        await f.write(content)
    return stored_name, len(content)


def resolve_stored_file(filename: str) -> Optional[Path]:
    """Path of a stored file, or None if the name is unsafe or absent."""
    if not filename or filename != safe_original_name(filename) or filename in (".", ".."):
        return None
    path = upload_dir() / filename
    if not path.is_file():
        return None
    return path
