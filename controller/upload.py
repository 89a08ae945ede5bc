from typing import Optional
from fastapi import UploadFile

import error
from schema.upload import UploadOut
from service.files.storage import UploadStorage


class UploadOp:

    @staticmethod
    async def upload_file(file: Optional[UploadFile], storage: UploadStorage,
                          max_bytes: int) -> UploadOut:
        """Store a single uploaded file and return its public path"""
        if file is None or not file.filename:
            raise error.MissingFileError()

        if file.size is not None and file.size > max_bytes:
            raise error.FileTooLargeError(
                f"File too large (max {max_bytes} bytes)")

        content = await file.read()
        if len(content) > max_bytes:
            raise error.FileTooLargeError(
                f"File too large (max {max_bytes} bytes)")

        asset = await storage.save_file(content, file.filename)
        return UploadOut(file=asset.access_path)
