from pydantic import BaseModel


class UploadedAsset(BaseModel):
    original_name: str
    stored_name: str
    access_path: str
    size: int


class UploadOut(BaseModel):
    ok: bool = True
    file: str
