"""
Direct-to-S3 upload signing and media records.

The API never handles file bytes: the admin panel asks for a short-lived
presigned PUT URL, uploads straight to the bucket, then stores the returned
public URL in a section field (and optionally records it via /api/media).
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import logging
import re
import uuid

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pymongo.errors import PyMongoError

from impact_report.core.config import Settings, settings
from impact_report.core.errors import ContentError, InvalidPayload, StorageFailure

logger = logging.getLogger(__name__)

MEDIA_COLLECTION = "media"

CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/avif": "avif",
    "image/gif": "gif",
    "video/mp4": "mp4",
    "video/quicktime": "mov",
    "video/webm": "webm",
}


class UploadSigningFailed(ContentError):
    status_code = 500
    message = "Failed to sign upload"


def infer_extension(content_type: Optional[str]) -> Optional[str]:
    if not content_type:
        return None
    return CONTENT_TYPE_EXTENSIONS.get(content_type)


def build_object_key(
    content_type: str,
    extension: Optional[str] = None,
    folder: Optional[str] = None,
    key: Optional[str] = None,
    today: Optional[datetime] = None,
) -> str:
    """
    Pick the object key for an upload.

    A caller-provided key is kept (after stripping unsafe characters) so the
    same object can be overwritten under bucket versioning; otherwise a dated
    random key is generated under `folder` (default "media").
    """
    if key:
        safe_key = re.sub(r"[^a-zA-Z0-9/_.-]", "", key)
        if not safe_key or safe_key.startswith("/"):
            raise InvalidPayload("Invalid key")
        return safe_key

    date_prefix = (today or datetime.now(timezone.utc)).strftime("%Y-%m-%d")
    safe_ext = re.sub(r"[^a-zA-Z0-9]", "", extension or "") or infer_extension(content_type) or "bin"
    base_folder = re.sub(r"[^a-zA-Z0-9/_-]", "", folder or "") or "media"
    return f"{base_folder}/{date_prefix}/{uuid.uuid4()}.{safe_ext}"


class UploadService:
    """Presigned upload URLs for the configured bucket."""

    def __init__(self, config: Settings = settings, s3_client=None):
        self.config = config
        self._s3 = s3_client

    @property
    def s3(self):
        if self._s3 is None:
            self._s3 = boto3.client("s3", region_name=self.config.aws_region)
        return self._s3

    def sign_upload(
        self,
        content_type: str,
        extension: Optional[str] = None,
        folder: Optional[str] = None,
        key: Optional[str] = None,
    ) -> Dict[str, Any]:
        if not content_type:
            raise InvalidPayload("contentType is required")

        # Never log the signed URL itself
        logger.info(
            f"[uploads] sign request (contentType={content_type}, extension={extension}, "
            f"folder={folder}, providedKey={key})"
        )
        object_key = build_object_key(content_type, extension=extension, folder=folder, key=key)
        expires = self.config.upload_url_expires_seconds

        try:
            upload_url = self.s3.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": self.config.s3_bucket,
                    "Key": object_key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"[uploads] Failed to sign upload: {e}", exc_info=True)
            raise UploadSigningFailed() from e

        logger.info(f"[uploads] sign success (key={object_key}, expiresInSeconds={expires})")
        return {
            "uploadUrl": upload_url,
            "key": object_key,
            "publicUrl": f"{self.config.public_url_base}/{object_key}",
            "expiresInSeconds": expires,
        }


def _number_or_none(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    return value if isinstance(value, (int, float)) else None


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def build_media_record(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize a media payload into the stored record."""
    key = payload.get("key")
    public_url = payload.get("publicUrl")
    if not key or not public_url:
        raise InvalidPayload("key and publicUrl are required")

    entity_type = payload.get("entityType")
    entity_id = payload.get("entityId")

    return {
        "key": key,
        "url": public_url,
        "contentType": payload.get("contentType"),
        "bytes": _number_or_none(payload.get("bytes")),
        "width": _number_or_none(payload.get("width")),
        "height": _number_or_none(payload.get("height")),
        "duration": _number_or_none(payload.get("duration")),
        "alt": _string_or_none(payload.get("alt")),
        "tag": _string_or_none(payload.get("tag")),
        "entity": {"type": entity_type, "id": str(entity_id)} if entity_type and entity_id else None,
        "createdAt": datetime.now(timezone.utc),
    }


async def save_media(store, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Insert a media record and return `{id, data}`."""
    record = build_media_record(payload)
    try:
        media = await store.get_collection(MEDIA_COLLECTION)
        result = await media.insert_one(dict(record))
    except PyMongoError as e:
        logger.error(f"[media] Failed to save media {record['key']}: {e}", exc_info=True)
        raise StorageFailure() from e

    logger.info(f"[media] saved (id={result.inserted_id}, key={record['key']})")
    return {"id": str(result.inserted_id), "data": record}
