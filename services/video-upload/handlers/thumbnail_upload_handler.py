"""Handler for thumbnail uploads."""

import os
from typing import BinaryIO
from uuid import UUID

from tubely_common import Video
from tubely_common.logging import setup_logging

from config import ThumbnailConfig
from domain import extension_for_media_type, parse_media_type, thumbnail_object_name
from exceptions import UnsupportedMediaTypeError
from interfaces import StorageClient
from repositories import VideoRepository

from .video_access import get_owned_video, save_or_discard

logger = setup_logging()


class ThumbnailUploadHandler:
    """Validates a thumbnail image, stores it and points the video at it."""

    def __init__(
        self,
        storage: StorageClient,
        repository: VideoRepository,
        config: ThumbnailConfig,
    ):
        self._storage = storage
        self._repository = repository
        self._config = config

    def process(
        self,
        video_id: UUID,
        user_id: UUID,
        data: BinaryIO,
        content_type: str | None,
    ) -> Video:
        """
        Stores a thumbnail for a video owned by ``user_id``.

        Args:
            video_id: The video receiving the thumbnail.
            user_id: The authenticated uploader.
            data: The image payload, seekable.
            content_type: The Content-Type declared for the form part.

        Returns:
            The updated video record.

        Raises:
            InvalidMediaTypeError: If the Content-Type is malformed.
            UnsupportedMediaTypeError: If the type is not an allowed image type.
            VideoNotFoundError: If the video does not exist.
            NotVideoOwnerError: If the user does not own the video.
            StorageUploadError: If the image cannot be stored.
            VideoUpdateError: If the record cannot be saved.
        """
        media_type = parse_media_type(content_type)
        allowed = self._config.allowed_media_types
        if allowed and media_type not in allowed:
            raise UnsupportedMediaTypeError(media_type)
        extension = extension_for_media_type(media_type)

        video = get_owned_video(self._repository, video_id, user_id)
        previous_url = video.thumbnail_url

        data.seek(0, os.SEEK_END)
        size = data.tell()
        data.seek(0)

        if self._config.storage_backend == "memory":
            # served from /api/thumbnails/<video_id>
            object_name = str(video_id)
        else:
            object_name = thumbnail_object_name(video_id, extension, self._config.naming)
        thumbnail_url = self._storage.upload(
            object_name=object_name,
            data=data,
            size=size,
            content_type=media_type,
        )

        video.thumbnail_url = thumbnail_url
        video = save_or_discard(
            self._repository,
            self._storage,
            video,
            object_name,
            overwrote_current=thumbnail_url == previous_url,
        )

        logger.info(
            "Thumbnail uploaded",
            extra={
                "video_id": str(video_id),
                "object_name": object_name,
                "media_type": media_type,
            },
        )
        return video
