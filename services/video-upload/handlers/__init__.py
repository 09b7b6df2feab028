"""Upload orchestration."""

from .thumbnail_upload_handler import ThumbnailUploadHandler
from .video_upload_handler import VideoUploadHandler

__all__ = ["ThumbnailUploadHandler", "VideoUploadHandler"]
