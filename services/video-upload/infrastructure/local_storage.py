"""Filesystem implementation of the StorageClient interface."""

import shutil
from pathlib import Path
from typing import BinaryIO

from tubely_common.logging import setup_logging

from exceptions import StorageDeleteError, StorageUploadError
from interfaces import StorageClient

logger = setup_logging()


class LocalFileStorage(StorageClient):
    """Writes assets under a directory that is served at ``/assets``."""

    def __init__(self, assets_root: Path, base_url: str):
        self._assets_root = Path(assets_root)
        self._base_url = base_url.rstrip("/")

    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> str:
        file_path = self._path_for(object_name)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "wb") as f:
                shutil.copyfileobj(data, f)
            logger.info(
                "File written to assets directory",
                extra={"object_name": object_name, "size": size},
            )
        except OSError as e:
            logger.exception(
                "Assets write failed",
                extra={"object_name": object_name, "file_path": str(file_path)},
            )
            raise StorageUploadError(object_name, e) from e

        return f"{self._base_url}/assets/{object_name}"

    def delete(self, object_name: str) -> None:
        try:
            self._path_for(object_name).unlink(missing_ok=True)
        except OSError as e:
            logger.exception("Assets delete failed", extra={"object_name": object_name})
            raise StorageDeleteError(object_name, e) from e

    def _path_for(self, object_name: str) -> Path:
        return self._assets_root / object_name
