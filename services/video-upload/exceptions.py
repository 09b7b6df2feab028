"""Custom exceptions for the video-upload service."""

from uuid import UUID

from tubely_common.exceptions import StorageDeleteError, StorageUploadError

__all__ = [
    "StorageUploadError",
    "StorageDeleteError",
    "MissingCredentialsError",
    "InvalidCredentialsError",
    "InvalidMediaTypeError",
    "UnsupportedMediaTypeError",
    "VideoNotFoundError",
    "VideoLookupError",
    "VideoUpdateError",
    "NotVideoOwnerError",
    "MediaProbeError",
    "TempFileError",
]


class MissingCredentialsError(Exception):
    """Raised when the request carries no usable bearer token."""

    def __init__(self, reason: str = "No bearer token in Authorization header"):
        super().__init__(reason)


class InvalidCredentialsError(Exception):
    """Raised when a bearer token fails validation."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Invalid or expired token")


class InvalidMediaTypeError(Exception):
    """Raised when a declared Content-Type cannot be parsed."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__(f"Invalid media type '{content_type}'")


class UnsupportedMediaTypeError(Exception):
    """Raised when a media type parses but is not accepted for the upload."""

    def __init__(self, media_type: str):
        self.media_type = media_type
        super().__init__(f"Unsupported media type '{media_type}'")


class VideoNotFoundError(Exception):
    """Raised when a requested video does not exist."""

    def __init__(self, video_id: UUID):
        self.video_id = video_id
        super().__init__(f"Video {video_id} not found")


class VideoLookupError(Exception):
    """Raised when reading a video record fails."""

    def __init__(self, video_id: UUID, cause: Exception | None = None):
        self.video_id = video_id
        self.cause = cause
        super().__init__(f"Failed to load video {video_id}")


class VideoUpdateError(Exception):
    """Raised when persisting a video record fails."""

    def __init__(self, video_id: UUID, cause: Exception | None = None):
        self.video_id = video_id
        self.cause = cause
        super().__init__(f"Failed to update video {video_id}")


class NotVideoOwnerError(Exception):
    """Raised when the authenticated user does not own the video."""

    def __init__(self, video_id: UUID, user_id: UUID):
        self.video_id = video_id
        self.user_id = user_id
        super().__init__(f"User {user_id} does not own video {video_id}")


class MediaProbeError(Exception):
    """Raised when a media file cannot be probed for its dimensions."""

    def __init__(self, file_path: str, cause: Exception | None = None):
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"Failed to probe media file '{file_path}'")


class TempFileError(Exception):
    """Raised when an upload cannot be spooled to a temporary file."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Failed to write upload to a temporary file")
