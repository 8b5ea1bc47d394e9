"""
Helper Functions

Contains utility functions for storing and resolving uploaded media.
"""

import os
import shutil
import uuid
from typing import Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from .game_logger import game_logger


def storage_filename(original_name: str) -> str:
    """Random file name that keeps the extension of the uploaded file."""
    extension = os.path.splitext(secure_filename(original_name or ''))[1].lower()
    return f"{uuid.uuid4().hex}{extension}"


def save_upload(upload: FileStorage, upload_dir: str) -> str:
    """
    Store an uploaded file in upload_dir.

    Returns:
        str: The stored file name, relative to upload_dir
    """
    os.makedirs(upload_dir, exist_ok=True)
    filename = storage_filename(upload.filename)
    upload.save(os.path.join(upload_dir, filename))
    return filename


def copy_media(source_path: str, upload_dir: str) -> str:
    """Copy a local media file into upload_dir under a random name."""
    os.makedirs(upload_dir, exist_ok=True)
    filename = storage_filename(os.path.basename(source_path))
    shutil.copyfile(source_path, os.path.join(upload_dir, filename))
    return filename


def remove_media(filename: Optional[str], upload_dir: str) -> bool:
    """
    Delete a stored media file.

    Returns:
        bool: True if a file was removed, False if it was already gone
    """
    if not filename:
        return False

    path = os.path.join(upload_dir, os.path.basename(filename))
    try:
        os.remove(path)
        return True
    except FileNotFoundError:
        game_logger.logger.warning(f"Media file already missing: {path}")
        return False


def to_storage_url(filename: Optional[str]) -> Optional[str]:
    """Public URL of a stored media file."""
    if not filename:
        return None
    return f"/public/{filename}"
