from pydantic_settings import BaseSettings
from typing import List, Optional
import os


class Settings(BaseSettings):
    # MongoDB
    # Connection is established lazily on first use, so an unset URI only
    # fails when a request actually touches the store.
    mongo_uri: Optional[str] = os.getenv("MONGO_URI")
    mongo_db_name: str = os.getenv("MONGO_DB_NAME", "gogo-impact-report")
    mongo_server_selection_timeout_ms: int = 8000
    mongo_socket_timeout_ms: int = 45000
    mongo_max_pool_size: int = 10

    # Content
    default_slug: str = "impact-report"

    # Application
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["http://localhost:5173"]

    # Auth
    secret_key: str = "your-secret-key-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 720  # 12 hours

    # Uploads (S3 + CDN)
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    s3_bucket: Optional[str] = os.getenv("S3_BUCKET")
    cdn_base_url: Optional[str] = os.getenv("CDN_BASE_URL")
    upload_url_expires_seconds: int = 60

    @property
    def public_url_base(self) -> str:
        """Base URL under which uploaded objects are served."""
        if self.cdn_base_url:
            return self.cdn_base_url.rstrip("/")
        return f"https://{self.s3_bucket}.s3.amazonaws.com"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore unrelated env vars (NODE_ENV, VITE_* etc.)


settings = Settings()
