"""Upload signing and media schemas."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional


class SignUploadRequest(BaseModel):
    """Schema for requesting a presigned upload URL."""
    model_config = ConfigDict(populate_by_name=True)

    content_type: Optional[str] = Field(None, alias="contentType")
    extension: Optional[str] = None
    folder: Optional[str] = None
    key: Optional[str] = None  # explicit object key, enables versioned overwrites


class SignUploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    upload_url: str = Field(..., alias="uploadUrl")
    key: str
    public_url: str = Field(..., alias="publicUrl")
    expires_in_seconds: int = Field(..., alias="expiresInSeconds")


class MediaResponse(BaseModel):
    id: str
    data: Dict[str, Any]
