from datetime import datetime

import pytest
from botocore.exceptions import ClientError

from impact_report.api.endpoints.uploads import get_upload_service
from impact_report.core.config import Settings
from impact_report.core.errors import InvalidPayload
from impact_report.main import app
from impact_report.services.upload_service import (
    UploadService,
    UploadSigningFailed,
    build_media_record,
    build_object_key,
)


class FakeS3:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def generate_presigned_url(self, operation, Params, ExpiresIn):
        if self.error:
            raise self.error
        self.calls.append((operation, Params, ExpiresIn))
        return f"https://bucket.s3.amazonaws.com/{Params['Key']}?signature=abc"


@pytest.fixture
def upload_settings():
    return Settings(s3_bucket="impact-media", cdn_base_url="https://cdn.example.org/")


class TestObjectKey:
    def test_generated_key_is_dated_under_folder(self):
        key = build_object_key("image/png", folder="hero", today=datetime(2024, 5, 17))
        assert key.startswith("hero/2024-05-17/")
        assert key.endswith(".png")

    def test_extension_falls_back_to_bin(self):
        assert build_object_key("application/x-unknown").endswith(".bin")

    def test_explicit_extension_is_sanitized(self):
        assert build_object_key("image/png", extension=".j/p*g").endswith(".jpg")

    def test_folder_defaults_to_media(self):
        assert build_object_key("image/png", folder="!!!").startswith("media/")

    def test_provided_key_is_sanitized(self):
        assert build_object_key("image/png", key="hero/logo v2.png") == "hero/logov2.png"

    @pytest.mark.parametrize("bad_key", ["/etc/passwd", "$$$"])
    def test_invalid_provided_key(self, bad_key):
        with pytest.raises(InvalidPayload):
            build_object_key("image/png", key=bad_key)


class TestUploadService:
    def test_sign_upload(self, upload_settings):
        s3 = FakeS3()
        result = UploadService(upload_settings, s3_client=s3).sign_upload("image/jpeg", key="hero/bg.jpg")

        assert result == {
            "uploadUrl": "https://bucket.s3.amazonaws.com/hero/bg.jpg?signature=abc",
            "key": "hero/bg.jpg",
            "publicUrl": "https://cdn.example.org/hero/bg.jpg",
            "expiresInSeconds": 60,
        }
        operation, params, expires = s3.calls[0]
        assert operation == "put_object"
        assert params == {"Bucket": "impact-media", "Key": "hero/bg.jpg", "ContentType": "image/jpeg"}
        assert expires == 60

    def test_content_type_required(self, upload_settings):
        with pytest.raises(InvalidPayload, match="contentType is required"):
            UploadService(upload_settings, s3_client=FakeS3()).sign_upload(None)

    def test_signing_error(self, upload_settings):
        error = ClientError({"Error": {"Code": "AccessDenied", "Message": "no"}}, "PutObject")
        with pytest.raises(UploadSigningFailed):
            UploadService(upload_settings, s3_client=FakeS3(error)).sign_upload("image/png")

    def test_public_url_defaults_to_bucket(self):
        config = Settings(s3_bucket="impact-media", cdn_base_url=None)
        result = UploadService(config, s3_client=FakeS3()).sign_upload("image/png", key="a.png")
        assert result["publicUrl"] == "https://impact-media.s3.amazonaws.com/a.png"


class TestUploadEndpoints:
    @pytest.fixture(autouse=True)
    def fake_uploads(self, upload_settings):
        app.dependency_overrides[get_upload_service] = lambda: UploadService(upload_settings, s3_client=FakeS3())
        yield
        app.dependency_overrides.pop(get_upload_service, None)

    def test_sign_requires_admin(self, client):
        response = client.post("/api/uploads/sign", json={"contentType": "image/png"})
        assert response.status_code == 401

    def test_sign(self, client, admin_headers):
        response = client.post(
            "/api/uploads/sign", json={"contentType": "image/png", "folder": "hero"}, headers=admin_headers
        )
        assert response.status_code == 200
        body = response.json()
        assert body["key"].startswith("hero/")
        assert body["publicUrl"] == f"https://cdn.example.org/{body['key']}"
        assert body["expiresInSeconds"] == 60

    def test_sign_missing_content_type(self, client, admin_headers):
        response = client.post("/api/uploads/sign", json={}, headers=admin_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "contentType is required"}

    def test_create_media(self, client, store, admin_headers):
        response = client.post(
            "/api/media",
            json={"key": "hero/a.png", "publicUrl": "https://cdn/hero/a.png", "width": 640, "alt": 5},
            headers=admin_headers,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["url"] == "https://cdn/hero/a.png"
        assert data["width"] == 640
        assert data["alt"] is None
        assert store.collection("media").docs[0]["key"] == "hero/a.png"

    def test_create_media_requires_key_and_url(self, client, admin_headers):
        response = client.post("/api/media", json={"key": "a"}, headers=admin_headers)
        assert response.status_code == 400


def test_media_record_entity():
    record = build_media_record({"key": "k", "publicUrl": "u", "entityType": "hero", "entityId": 7, "bytes": True})
    assert record["entity"] == {"type": "hero", "id": "7"}
    assert record["bytes"] is None
