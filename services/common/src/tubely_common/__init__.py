from tubely_common.config import DatabaseConfig, ObjectStoreConfig
from tubely_common.db_models import User, Video
from tubely_common.exceptions import StorageDeleteError, StorageUploadError
from tubely_common.logging import setup_logging

__all__ = [
    "setup_logging",
    "StorageUploadError",
    "StorageDeleteError",
    "ObjectStoreConfig",
    "DatabaseConfig",
    "User",
    "Video",
]
