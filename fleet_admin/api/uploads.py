from typing import Optional

from fastapi import APIRouter, Depends, UploadFile

from fleet_admin.dependencies import get_upload_service, read_upload, require_admin
from fleet_admin.schemas.common import UploadResponse
from fleet_admin.services.upload_service import UploadService

router = APIRouter()


@router.post(
    "/upload",
    summary="Upload one image (Admin)",
    response_model=UploadResponse,
    dependencies=[Depends(require_admin)],
)
async def upload_image(
    image:    Optional[UploadFile] = Depends(read_upload),
    uploads:  UploadService        = Depends(get_upload_service),
):
    """Accepts a multipart field named `image`; returns the URL it is served from."""
    return {"url": await uploads.store(image)}
