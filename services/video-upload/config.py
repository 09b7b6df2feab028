"""Application configuration loaded from environment variables."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field
from tubely_common import DatabaseConfig, ObjectStoreConfig


class ServerConfig(BaseModel, frozen=True):
    """Public address the service builds asset URLs from."""

    host: str = "localhost"
    port: str = "8091"

    @computed_field
    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


class AuthConfig(BaseModel, frozen=True):
    """JWT validation configuration."""

    jwt_secret: str


class ThumbnailConfig(BaseModel, frozen=True):
    """Thumbnail upload configuration."""

    storage_backend: Literal["local", "inline", "memory", "s3"] = "local"
    naming: Literal["random", "video_id"] = "random"
    allowed_media_types: tuple[str, ...] = ("image/jpeg", "image/png")
    max_upload_bytes: int = 10 << 20
    assets_root: Path = Path("assets")


class VideoConfig(BaseModel, frozen=True):
    """Video upload configuration."""

    max_upload_bytes: int = 1 << 30
    media_probe: Literal["ffprobe", "moviepy"] = "ffprobe"
    ffprobe_path: str = "ffprobe"
    ffprobe_timeout_seconds: float = 30.0
    classify_aspect_ratio: bool = True
    temp_dir: Path | None = None


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    server: ServerConfig
    auth: AuthConfig
    thumbnails: ThumbnailConfig
    videos: VideoConfig
    object_store: ObjectStoreConfig
    database: DatabaseConfig


def _csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip().lower() for item in value.split(",") if item.strip())


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        server=ServerConfig(
            host=os.getenv("PLATFORM_HOST", "localhost"),
            port=os.getenv("PORT", "8091"),
        ),
        auth=AuthConfig(
            jwt_secret=os.getenv("JWT_SECRET", ""),
        ),
        thumbnails=ThumbnailConfig(
            storage_backend=os.getenv("THUMBNAIL_STORAGE", "local"),
            naming=os.getenv("THUMBNAIL_NAMING", "random"),
            allowed_media_types=_csv(
                os.getenv("THUMBNAIL_ALLOWED_MEDIA_TYPES", "image/jpeg,image/png")
            ),
            max_upload_bytes=int(
                os.getenv("THUMBNAIL_MAX_UPLOAD_BYTES", str(10 << 20))
            ),
            assets_root=Path(os.getenv("ASSETS_ROOT", "assets")),
        ),
        videos=VideoConfig(
            max_upload_bytes=int(os.getenv("VIDEO_MAX_UPLOAD_BYTES", str(1 << 30))),
            media_probe=os.getenv("MEDIA_PROBE", "ffprobe"),
            ffprobe_path=os.getenv("FFPROBE_PATH", "ffprobe"),
            ffprobe_timeout_seconds=float(os.getenv("FFPROBE_TIMEOUT_SECONDS", "30")),
            classify_aspect_ratio=_flag(os.getenv("CLASSIFY_ASPECT_RATIO", "true")),
            temp_dir=os.getenv("UPLOAD_TEMP_DIR") or None,
        ),
        object_store=ObjectStoreConfig(
            endpoint=os.getenv("S3_ENDPOINT", "s3.amazonaws.com"),
            user=os.getenv("S3_ACCESS_KEY", ""),
            password=os.getenv("S3_SECRET_KEY", ""),
            bucket_name=os.getenv("S3_BUCKET", "tubely"),
            region=os.getenv("S3_REGION", "us-east-1"),
            secure=_flag(os.getenv("S3_SECURE", "true")),
            public_base_url=os.getenv("S3_PUBLIC_BASE_URL") or None,
        ),
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "tubely"),
        ),
    )
