"""Ownership checks and metadata persistence shared by the upload handlers."""

from uuid import UUID

from tubely_common import Video
from tubely_common.logging import setup_logging

from exceptions import NotVideoOwnerError, StorageDeleteError, VideoUpdateError
from interfaces import StorageClient
from repositories import VideoRepository

logger = setup_logging()


def get_owned_video(repository: VideoRepository, video_id: UUID, user_id: UUID) -> Video:
    """
    Loads a video and checks that ``user_id`` owns it.

    Raises:
        VideoNotFoundError: If the video does not exist.
        NotVideoOwnerError: If another user owns it.
    """
    video = repository.get_video(video_id)
    if video.user_id != user_id:
        logger.warning(
            "Upload rejected for non-owner",
            extra={"video_id": str(video_id), "user_id": str(user_id)},
        )
        raise NotVideoOwnerError(video_id, user_id)
    return video


def save_or_discard(
    repository: VideoRepository,
    storage: StorageClient,
    video: Video,
    object_name: str,
    overwrote_current: bool = False,
) -> Video:
    """
    Persists ``video`` after its asset was stored under ``object_name``.

    When the update fails the stored object is deleted on a best-effort basis
    and the VideoUpdateError is re-raised. The delete is skipped when
    ``overwrote_current`` is set: the write replaced the asset the record
    already points at, so removing it would leave that URL dangling.
    """
    video_id = video.id
    try:
        return repository.update_video(video)
    except VideoUpdateError:
        if overwrote_current:
            logger.warning(
                "Update failed after overwriting the current asset",
                extra={"video_id": str(video_id), "object_name": object_name},
            )
            raise
        try:
            storage.delete(object_name)
            logger.info(
                "Orphaned asset removed",
                extra={"video_id": str(video_id), "object_name": object_name},
            )
        except StorageDeleteError:
            logger.exception(
                "Orphaned asset could not be removed",
                extra={"video_id": str(video_id), "object_name": object_name},
            )
        raise
