"""FastAPI dependency injection configuration."""

from functools import lru_cache
from typing import Annotated, Generator
from uuid import UUID

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session as DBSession
from sqlmodel import create_engine
from tubely_common.logging import setup_logging
from tubely_common.minio import get_minio_client

from auth import get_bearer_token, validate_jwt
from config import AppConfig, load_config
from exceptions import InvalidCredentialsError, MissingCredentialsError
from handlers import ThumbnailUploadHandler, VideoUploadHandler
from infrastructure import (
    FFprobeMediaProbe,
    InlineDataStorage,
    InMemoryStorage,
    LocalFileStorage,
    MinioStorage,
    MoviepyMediaProbe,
)
from interfaces import MediaProbe, StorageClient
from repositories import VideoRepository

logger = setup_logging()

_config = load_config()


def get_config() -> AppConfig:
    """Returns the application configuration."""
    return _config


ConfigDep = Annotated[AppConfig, Depends(get_config)]


@lru_cache
def _get_engine():
    return create_engine(_config.database.url)


def get_db_session() -> Generator[DBSession, None, None]:
    """Yields a database session, ensuring proper cleanup."""
    with DBSession(_get_engine()) as session:
        yield session


def get_video_repository(
    db_session: Annotated[DBSession, Depends(get_db_session)],
) -> VideoRepository:
    """Creates a VideoRepository with the provided database session."""
    return VideoRepository(db_session)


@lru_cache
def _get_object_storage() -> MinioStorage:
    storage = MinioStorage(
        get_minio_client(_config.object_store),
        _config.object_store.bucket_name,
        _config.object_store.public_url,
    )
    storage.ensure_bucket_exists()
    return storage


@lru_cache
def get_memory_storage() -> InMemoryStorage:
    """Returns the process-wide in-memory asset store."""
    return InMemoryStorage(_config.server.base_url)


def get_thumbnail_storage(
    config: ConfigDep,
    memory_storage: Annotated[InMemoryStorage, Depends(get_memory_storage)],
) -> StorageClient:
    """Returns the storage backend selected for thumbnails."""
    backend = config.thumbnails.storage_backend
    if backend == "inline":
        return InlineDataStorage()
    if backend == "memory":
        return memory_storage
    if backend == "s3":
        return _get_object_storage()
    return LocalFileStorage(config.thumbnails.assets_root, config.server.base_url)


def get_video_storage() -> StorageClient:
    """Returns the object store used for video files."""
    return _get_object_storage()


def get_media_probe(config: ConfigDep) -> MediaProbe | None:
    """Returns the configured media probe, or None when classification is off."""
    if not config.videos.classify_aspect_ratio:
        return None
    if config.videos.media_probe == "moviepy":
        return MoviepyMediaProbe()
    return FFprobeMediaProbe(
        binary=config.videos.ffprobe_path,
        timeout_seconds=config.videos.ffprobe_timeout_seconds,
    )


def get_current_user_id(request: Request, config: ConfigDep) -> UUID:
    """Resolves the authenticated user from the bearer token."""
    try:
        token = get_bearer_token(request.headers)
    except MissingCredentialsError:
        raise HTTPException(status_code=401, detail="Couldn't find JWT")
    try:
        return validate_jwt(token, config.auth.jwt_secret)
    except InvalidCredentialsError:
        raise HTTPException(status_code=401, detail="Couldn't validate JWT")


RepositoryDep = Annotated[VideoRepository, Depends(get_video_repository)]


def get_thumbnail_handler(
    storage: Annotated[StorageClient, Depends(get_thumbnail_storage)],
    repository: RepositoryDep,
    config: ConfigDep,
) -> ThumbnailUploadHandler:
    """Returns a thumbnail handler bound to the request's repository."""
    return ThumbnailUploadHandler(storage, repository, config.thumbnails)


def get_video_handler(
    storage: Annotated[StorageClient, Depends(get_video_storage)],
    repository: RepositoryDep,
    probe: Annotated[MediaProbe | None, Depends(get_media_probe)],
    config: ConfigDep,
) -> VideoUploadHandler:
    """Returns a video handler bound to the request's repository."""
    return VideoUploadHandler(storage, repository, probe, config.videos.temp_dir)
