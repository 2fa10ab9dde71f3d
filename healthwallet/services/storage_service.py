"""
Local storage service for uploaded report files.
"""

import logging
from pathlib import Path

from healthwallet.core.config import Settings
from healthwallet.utils.file_utils import (
    ensure_upload_dir,
    file_url_for,
    generate_unique_filename,
    user_relative_path,
)

logger = logging.getLogger(__name__)


class StorageService:
    """Stores files on disk under ``<upload_dir>/<user_id>/``."""

    def __init__(self, settings: Settings):
        """
        Initialize storage service.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.root = Path(settings.upload_dir).resolve()
        ensure_upload_dir(str(self.root))

    def save_file(self, content: bytes, original_filename: str, user_id: int) -> dict:
        """
        Write file content into the user's directory.

        Args:
            content: File bytes
            original_filename: Name the client sent (only the extension is kept)
            user_id: Owner of the file

        Returns:
            Dictionary with file information
        """
        relative_path = user_relative_path(
            user_id, generate_unique_filename(original_filename)
        )
        destination = self.resolve(relative_path)
        ensure_upload_dir(str(destination.parent))
        destination.write_bytes(content)

        logger.info(
            "Stored %s (%d bytes) for user %s at %s",
            original_filename,
            len(content),
            user_id,
            relative_path,
        )
        return {
            "file_path": relative_path,
            "original_filename": original_filename,
            "size": len(content),
            "url": file_url_for(relative_path),
        }

    def resolve(self, relative_path: str) -> Path:
        """Absolute path for a storage key; rejects keys escaping the root."""
        path = (self.root / relative_path).resolve()
        if self.root not in path.parents:
            raise ValueError(f"Path escapes upload directory: {relative_path}")
        return path

    def exists(self, relative_path: str) -> bool:
        return self.resolve(relative_path).is_file()

    def delete_file(self, relative_path: str) -> bool:
        """
        Remove a stored file. Missing files are not an error.

        Returns:
            True if a file was removed, False otherwise
        """
        try:
            self.resolve(relative_path).unlink()
        except FileNotFoundError:
            logger.info("File already absent: %s", relative_path)
            return False
        except OSError as e:
            logger.warning("Could not delete %s: %s", relative_path, e)
            return False
        logger.info("Deleted file %s", relative_path)
        return True
