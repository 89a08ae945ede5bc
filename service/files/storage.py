import os
import time
import asyncio
import logging
from pathlib import Path

import error
from schema.upload import UploadedAsset

logger = logging.getLogger(__name__)


class UploadStorage:
    """
    Public upload storage.
    Files are kept as ``{epoch millis}-{original name}`` and never expire.
    """

    def __init__(self, storage_dir: str, url_prefix: str = "/uploads"):
        self.storage_dir = Path(storage_dir)
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_dir(self) -> None:
        """Create the storage directory if it doesn't exist"""
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def stored_name_for(original_name: str, millis: int = None) -> str:
        # Browsers may send client-side paths; keep the last component only
        name = os.path.basename(original_name.replace("\\", "/")) or "upload"
        if millis is None:
            millis = time.time_ns() // 1_000_000
        return f"{millis}-{name}"

    async def save_file(self, content: bytes, original_name: str) -> UploadedAsset:
        """
        Save an uploaded file and return where it can be fetched
        """
        stored_name = self.stored_name_for(original_name)
        file_path = self.storage_dir / stored_name

        try:
            self.ensure_dir()
            await asyncio.to_thread(file_path.write_bytes, content)
        except OSError as e:
            logger.error(f"Failed to store upload {stored_name}: {e}")
            raise error.UploadError() from e

        logger.info(f"Stored upload {stored_name} ({len(content)} bytes)")

        return UploadedAsset(
            original_name=original_name,
            stored_name=stored_name,
            access_path=f"{self.url_prefix}/{stored_name}",
            size=len(content),
        )

    def resolve(self, stored_name: str) -> Path:
        """
        Return the path of a stored file, refusing names outside the directory
        """
        root = self.storage_dir.resolve()
        file_path = (root / stored_name).resolve()
        if file_path.parent != root or not file_path.is_file():
            raise error.ResourceNotFoundError()
        return file_path
