"""Concrete implementations of infrastructure interfaces."""

from .ffprobe import FFprobeMediaProbe
from .inline_storage import InlineDataStorage
from .local_storage import LocalFileStorage
from .memory_storage import InMemoryStorage, StoredAsset
from .minio_storage import MinioStorage
from .moviepy_probe import MoviepyMediaProbe

__all__ = [
    "FFprobeMediaProbe",
    "InlineDataStorage",
    "InMemoryStorage",
    "LocalFileStorage",
    "MinioStorage",
    "MoviepyMediaProbe",
    "StoredAsset",
]
