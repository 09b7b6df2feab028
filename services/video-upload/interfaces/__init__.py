"""Abstract interfaces for infrastructure dependencies."""

from .media_probe import MediaProbe
from .storage import StorageClient

__all__ = ["StorageClient", "MediaProbe"]
