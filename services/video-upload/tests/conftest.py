"""
Shared fixtures for the video-upload service tests.

The application is exercised through FastAPI's TestClient with its
infrastructure swapped out via ``app.dependency_overrides``:

- an in-memory SQLite database holding real ``users``/``videos`` tables,
- a mocked object store and media probe,
- a per-test config whose assets root and temp dir live under ``tmp_path``.
"""

import os
from datetime import timedelta
from typing import Generator, Iterator
from unittest.mock import Mock

os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("DD_TRACE_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session as DBSession
from sqlmodel import SQLModel, create_engine
from tubely_common import User, Video

from auth import make_jwt
from config import AppConfig, load_config
from dependencies import (
    get_config,
    get_db_session,
    get_media_probe,
    get_memory_storage,
    get_video_storage,
)
from domain import VideoDimensions
from infrastructure import InMemoryStorage
from interfaces import MediaProbe, StorageClient
from main import app

TEST_SECRET = "test-jwt-secret"
OBJECT_STORE_URL = "https://tubely.s3.us-east-1.amazonaws.com"
BOUNDARY = "tubely-test-boundary"


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    """Config with filesystem locations isolated under ``tmp_path``."""
    base = load_config()
    assets_root = tmp_path / "assets"
    temp_dir = tmp_path / "uploads"
    assets_root.mkdir()
    temp_dir.mkdir()
    return base.model_copy(
        update={
            "auth": base.auth.model_copy(update={"jwt_secret": TEST_SECRET}),
            "thumbnails": base.thumbnails.model_copy(
                update={"assets_root": assets_root}
            ),
            "videos": base.videos.model_copy(update={"temp_dir": temp_dir}),
        }
    )


def with_thumbnails(config: AppConfig, **changes) -> AppConfig:
    """Returns a copy of ``config`` with thumbnail settings changed."""
    return config.model_copy(
        update={"thumbnails": config.thumbnails.model_copy(update=changes)}
    )


def with_videos(config: AppConfig, **changes) -> AppConfig:
    """Returns a copy of ``config`` with video settings changed."""
    return config.model_copy(update={"videos": config.videos.model_copy(update=changes)})


def chunked_form(
    field: str,
    filename: str,
    content: bytes,
    content_type: str,
    text_fields: dict[str, str] | None = None,
    chunk_size: int = 64 * 1024,
) -> tuple[dict[str, str], Iterator[bytes]]:
    """
    Builds a multipart body sent as a generator, so it goes out chunked
    without a Content-Length header.

    Returns the request headers and the body iterator.
    """
    parts = []
    for name, value in (text_fields or {}).items():
        parts.append(
            f'--{BOUNDARY}\r\nContent-Disposition: form-data; name="{name}"\r\n\r\n'
            f"{value}\r\n".encode()
        )
    parts.append(
        (
            f"--{BOUNDARY}\r\n"
            f'Content-Disposition: form-data; name="{field}"; filename="{filename}"\r\n'
            f"Content-Type: {content_type}\r\n\r\n"
        ).encode()
        + content
        + b"\r\n"
    )
    parts.append(f"--{BOUNDARY}--\r\n".encode())
    body = b"".join(parts)

    def chunks() -> Iterator[bytes]:
        for start in range(0, len(body), chunk_size):
            yield body[start : start + chunk_size]

    headers = {"Content-Type": f"multipart/form-data; boundary={BOUNDARY}"}
    return headers, chunks()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[DBSession, None, None]:
    with DBSession(engine) as session:
        yield session


@pytest.fixture
def owner(db_session) -> User:
    user = User(email="owner@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session) -> User:
    user = User(email="someone-else@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def video(db_session, owner) -> Video:
    record = Video(title="Boots on the ground", description="A demo", user_id=owner.id)
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


def auth_headers(user: User) -> dict[str, str]:
    token = make_jwt(user.id, TEST_SECRET, timedelta(hours=1))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner_headers(owner) -> dict[str, str]:
    return auth_headers(owner)


@pytest.fixture
def object_storage() -> Mock:
    """Mocked object store that records the bytes it receives."""
    storage = Mock(spec=StorageClient)
    storage.received = {}

    def upload(object_name, data, size, content_type):
        storage.received[object_name] = data.read()
        return f"{OBJECT_STORE_URL}/{object_name}"

    storage.upload.side_effect = upload
    return storage


@pytest.fixture
def media_probe() -> Mock:
    probe = Mock(spec=MediaProbe)
    probe.probe.return_value = VideoDimensions(width=1920, height=1080)
    return probe


@pytest.fixture
def memory_storage(app_config) -> InMemoryStorage:
    return InMemoryStorage(app_config.server.base_url)


@pytest.fixture
def configure_app(app_config, db_session, object_storage, media_probe, memory_storage):
    """
    Installs dependency overrides and returns a function to change the config.

    Usage: ``configure_app(with_thumbnails(app_config, storage_backend="inline"))``.
    """

    def apply(config: AppConfig = app_config) -> AppConfig:
        app.dependency_overrides[get_config] = lambda: config
        return config

    def session_override():
        yield db_session

    apply()
    app.dependency_overrides[get_db_session] = session_override
    app.dependency_overrides[get_video_storage] = lambda: object_storage
    app.dependency_overrides[get_media_probe] = lambda: media_probe
    app.dependency_overrides[get_memory_storage] = lambda: memory_storage
    yield apply
    app.dependency_overrides.clear()


@pytest.fixture
def client(configure_app) -> TestClient:
    return TestClient(app)
