"""Upload signing and media record endpoints."""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status

from impact_report.core.auth import require_admin
from impact_report.core.mongodb import get_store
from impact_report.schemas.upload import MediaResponse, SignUploadRequest, SignUploadResponse
from impact_report.services.upload_service import UploadService, save_media

router = APIRouter(tags=["uploads"])

_upload_service = UploadService()


def get_upload_service() -> UploadService:
    return _upload_service


@router.post("/uploads/sign", response_model=SignUploadResponse)
async def sign_upload(
    request: SignUploadRequest,
    _admin: str = Depends(require_admin),
    uploads: UploadService = Depends(get_upload_service),
):
    """Return a presigned URL the admin panel can PUT a file to."""
    return uploads.sign_upload(
        request.content_type,
        extension=request.extension,
        folder=request.folder,
        key=request.key,
    )


@router.post("/media", response_model=MediaResponse, status_code=status.HTTP_201_CREATED)
async def create_media(
    payload: Dict[str, Any] = Body(...),
    _admin: str = Depends(require_admin),
    store=Depends(get_store),
):
    """Record an uploaded object's public URL and metadata."""
    return await save_media(store, payload)
