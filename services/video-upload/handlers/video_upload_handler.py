"""Handler for video uploads."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO
from uuid import UUID

from tubely_common import Video
from tubely_common.logging import setup_logging

from domain import AspectRatio, parse_media_type, video_object_name
from exceptions import TempFileError, UnsupportedMediaTypeError
from interfaces import MediaProbe, StorageClient
from repositories import VideoRepository

from .video_access import get_owned_video, save_or_discard

logger = setup_logging()

VIDEO_MEDIA_TYPE = "video/mp4"
TEMP_PREFIX = "tubely-upload-"


class VideoUploadHandler:
    """Spools an MP4 to disk, classifies it and uploads it to the object store."""

    def __init__(
        self,
        storage: StorageClient,
        repository: VideoRepository,
        probe: MediaProbe | None,
        temp_dir: Path | None = None,
    ):
        self._storage = storage
        self._repository = repository
        self._probe = probe
        self._temp_dir = temp_dir

    def process(
        self,
        video_id: UUID,
        user_id: UUID,
        data: BinaryIO,
        content_type: str | None,
    ) -> Video:
        """
        Stores a video file for a video record owned by ``user_id``.

        The payload is copied into a request-scoped temporary directory which
        is removed before this method returns, whatever the outcome.

        Args:
            video_id: The video record receiving the file.
            user_id: The authenticated uploader.
            data: The MP4 payload.
            content_type: The Content-Type declared for the form part.

        Returns:
            The updated video record.

        Raises:
            VideoNotFoundError: If the video does not exist.
            NotVideoOwnerError: If the user does not own the video.
            InvalidMediaTypeError: If the Content-Type is malformed.
            UnsupportedMediaTypeError: If the type is not video/mp4.
            TempFileError: If the payload cannot be spooled to disk.
            MediaProbeError: If the dimensions cannot be read.
            StorageUploadError: If the object store rejects the upload.
            VideoUpdateError: If the record cannot be saved.
        """
        video = get_owned_video(self._repository, video_id, user_id)

        media_type = parse_media_type(content_type)
        if media_type != VIDEO_MEDIA_TYPE:
            raise UnsupportedMediaTypeError(media_type)

        logger.info("Spooling video upload", extra={"video_id": str(video_id)})

        try:
            temp_dir = tempfile.TemporaryDirectory(prefix=TEMP_PREFIX, dir=self._temp_dir)
        except OSError as e:
            raise TempFileError(e) from e

        with temp_dir as temp_path:
            object_name, video_url = self._store(Path(temp_path), data, media_type)

        video.video_url = video_url
        video = save_or_discard(self._repository, self._storage, video, object_name)

        logger.info(
            "Video uploaded",
            extra={"video_id": str(video_id), "object_name": object_name},
        )
        return video

    def _store(
        self, temp_path: Path, data: BinaryIO, media_type: str
    ) -> tuple[str, str]:
        """Spools, probes and uploads the payload; returns its key and URL."""
        file_path = temp_path / "upload.mp4"
        try:
            spool = open(file_path, "w+b")
        except OSError as e:
            raise TempFileError(e) from e

        with spool as f:
            try:
                shutil.copyfileobj(data, f)
                f.flush()
                size = os.fstat(f.fileno()).st_size
            except OSError as e:
                logger.exception(
                    "Temp file write failed", extra={"file_path": str(file_path)}
                )
                raise TempFileError(e) from e

            aspect_ratio: AspectRatio | None = None
            if self._probe is not None:
                aspect_ratio = self._probe.probe(str(file_path)).aspect_ratio

            object_name = video_object_name(aspect_ratio)
            f.seek(0)
            video_url = self._storage.upload(
                object_name=object_name,
                data=f,
                size=size,
                content_type=media_type,
            )
        return object_name, video_url
