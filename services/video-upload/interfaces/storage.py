"""Abstract interface for asset storage backends."""

from abc import ABC, abstractmethod
from typing import BinaryIO


class StorageClient(ABC):
    """Abstract base class for asset storage backends."""

    @abstractmethod
    def upload(
        self,
        object_name: str,
        data: BinaryIO,
        size: int,
        content_type: str,
    ) -> str:
        """
        Stores an asset and returns the URL it can be fetched from.

        Args:
            object_name: The destination key/name in storage.
            data: File-like object positioned at the start of the payload.
            size: Size of the payload in bytes.
            content_type: MIME type of the payload.

        Returns:
            The public URL of the stored asset.

        Raises:
            StorageUploadError: If the write fails.
        """
        pass

    @abstractmethod
    def delete(self, object_name: str) -> None:
        """
        Removes a previously stored asset. Missing objects are ignored.

        Args:
            object_name: The key/name used on upload.

        Raises:
            StorageDeleteError: If the removal fails.
        """
        pass
