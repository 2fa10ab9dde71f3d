"""
File handling utilities for report uploads.
"""

import os
import uuid
from pathlib import PurePosixPath, PureWindowsPath
from typing import Set

UPLOADS_URL_PREFIX = "/uploads"


def get_file_extension(filename: str) -> str:
    """Return the lower-cased extension, e.g. '.pdf' for 'Scan.PDF'."""
    return PurePosixPath(clean_original_filename(filename)).suffix.lower()


def generate_unique_filename(original_filename: str) -> str:
    """
    Generate a collision-free stored name that keeps the original extension.

    Args:
        original_filename: Name the client sent

    Returns:
        "<uuid4 hex><ext>"
    """
    return f"{uuid.uuid4().hex}{get_file_extension(original_filename)}"


def clean_original_filename(filename: str) -> str:
    """
    Strip any directory components a client put in the uploaded name.

    Browsers on Windows have been known to send full paths, so both
    separators are handled.
    """
    name = PureWindowsPath(filename or "").name
    return PurePosixPath(name).name.strip()


def user_relative_path(user_id: int, stored_name: str) -> str:
    """Storage key for a user's file, always with forward slashes."""
    return f"{user_id}/{stored_name}"


def file_url_for(relative_path: str) -> str:
    """Public URL under which the static mount serves a stored file."""
    return f"{UPLOADS_URL_PREFIX}/{relative_path}"


def ensure_upload_dir(upload_dir: str) -> None:
    os.makedirs(upload_dir, exist_ok=True)


def is_allowed_file(filename: str, allowed_extensions: Set[str]) -> bool:
    """
    Check if file extension is allowed.

    Args:
        filename: Name of the file
        allowed_extensions: Set of allowed extensions (with leading dot)

    Returns:
        True if file type is allowed, False otherwise
    """
    extension = get_file_extension(filename)
    return bool(extension) and extension in allowed_extensions


def format_file_size(size_bytes: int) -> str:
    """Human-readable size, e.g. '2.45 MB'."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} TB"
