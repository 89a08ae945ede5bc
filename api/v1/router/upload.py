from typing import Optional
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse
from config.setting import Settings
from controller.upload import UploadOp
from core.setup import get_settings, get_upload_storage
from schema.common import ErrorOut
from schema.upload import UploadOut
from service.files.storage import UploadStorage

router = APIRouter(tags=["files"])
uploads_router = APIRouter(tags=["files"])


@router.post(
    "/upload",
    response_model=UploadOut,
    responses={400: {"model": ErrorOut}, 413: {"model": ErrorOut}},
)
async def upload_photo(
    photo: Optional[UploadFile] = File(None),
    storage: UploadStorage = Depends(get_upload_storage),
    settings: Settings = Depends(get_settings),
):
    """
    Upload a single photo; the response carries its public path
    """
    return await UploadOp.upload_file(photo, storage, settings.MAX_UPLOAD_BYTES)


@uploads_router.get("/{stored_name}", responses={404: {"model": ErrorOut}})
def download_upload(stored_name: str, storage: UploadStorage = Depends(get_upload_storage)):
    """Serve a previously uploaded file"""
    return FileResponse(path=storage.resolve(stored_name))
