"""In-process StorageClient backed by a lock-protected dictionary."""

import threading
from typing import BinaryIO, NamedTuple

from tubely_common.logging import setup_logging

from interfaces import StorageClient

logger = setup_logging()


class StoredAsset(NamedTuple):
    data: bytes
    content_type: str


class InMemoryStorage(StorageClient):
    """
    Keeps assets in memory and serves them from ``/api/thumbnails/<name>``.

    Thumbnails are stored under their video id, so a re-upload replaces the
    previous entry. Contents are lost on restart. Concurrent writes to the
    same key are last-writer-wins.
    """

    def __init__(self, base_url: str):
        self._base_url = base_url.rstrip("/")
        self._assets: dict[str, StoredAsset] = {}
        self._lock = threading.Lock()

    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> str:
        asset = StoredAsset(data=data.read(), content_type=content_type)
        with self._lock:
            self._assets[object_name] = asset
        logger.info(
            "Asset stored in memory",
            extra={"object_name": object_name, "size": len(asset.data)},
        )
        return f"{self._base_url}/api/thumbnails/{object_name}"

    def delete(self, object_name: str) -> None:
        with self._lock:
            self._assets.pop(object_name, None)

    def get(self, object_name: str) -> StoredAsset | None:
        with self._lock:
            return self._assets.get(object_name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._assets)
