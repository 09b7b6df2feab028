"""Repository for video metadata access."""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session as DBSession
from tubely_common import Video
from tubely_common.logging import setup_logging

from exceptions import VideoLookupError, VideoNotFoundError, VideoUpdateError

logger = setup_logging()


class VideoRepository:
    """
    Handles all database operations for videos.

    Encapsulates SQL access and returns table models,
    keeping the upload handlers free of database concerns.
    """

    def __init__(self, db_session: DBSession):
        self._db = db_session

    def get_video(self, video_id: UUID) -> Video:
        """
        Retrieves a single video record.

        Raises:
            VideoNotFoundError: If the video does not exist.
            VideoLookupError: If the query fails.
        """
        try:
            video = self._db.get(Video, video_id)
        except SQLAlchemyError as e:
            logger.exception("Video lookup failed", extra={"video_id": str(video_id)})
            raise VideoLookupError(video_id, e) from e

        if video is None:
            raise VideoNotFoundError(video_id)
        return video

    def update_video(self, video: Video) -> Video:
        """
        Persists changes to a video record and refreshes it.

        Raises:
            VideoUpdateError: If the write fails; the session is rolled back.
        """
        video_id = video.id
        video.updated_at = datetime.now(timezone.utc)
        try:
            self._db.add(video)
            self._db.commit()
            self._db.refresh(video)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.exception("Video update failed", extra={"video_id": str(video_id)})
            raise VideoUpdateError(video_id, e) from e
        return video
