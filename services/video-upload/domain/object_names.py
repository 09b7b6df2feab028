"""Storage key generation for uploaded assets."""

import base64
import secrets
from uuid import UUID

from .models import AspectRatio

RANDOM_NAME_BYTES = 32


def random_name() -> str:
    """Returns 32 random bytes encoded as unpadded URL-safe base64."""
    token = secrets.token_bytes(RANDOM_NAME_BYTES)
    return base64.urlsafe_b64encode(token).rstrip(b"=").decode("ascii")


def thumbnail_object_name(video_id: UUID, extension: str, naming: str) -> str:
    """Builds a thumbnail key, either random or derived from the video id."""
    if naming == "video_id":
        return f"{video_id}{extension}"
    return f"{random_name()}{extension}"


def video_object_name(aspect_ratio: AspectRatio | None, extension: str = ".mp4") -> str:
    """Builds a video key, prefixed by its aspect-ratio bucket when known."""
    name = f"{random_name()}{extension}"
    if aspect_ratio is None:
        return name
    return f"{aspect_ratio.prefix}/{name}"
