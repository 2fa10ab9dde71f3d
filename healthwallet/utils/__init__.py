"""
Utils package initialization.
"""

from healthwallet.utils.file_utils import (
    generate_unique_filename,
    clean_original_filename,
    user_relative_path,
    file_url_for,
    ensure_upload_dir,
    get_file_extension,
    is_allowed_file,
    format_file_size,
)

__all__ = [
    "generate_unique_filename",
    "clean_original_filename",
    "user_relative_path",
    "file_url_for",
    "ensure_upload_dir",
    "get_file_extension",
    "is_allowed_file",
    "format_file_size",
]
