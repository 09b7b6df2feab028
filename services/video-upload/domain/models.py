"""Domain models for the video-upload service."""

from enum import Enum

from pydantic import BaseModel, Field

LANDSCAPE_RATIO_RANGE = (1.7, 1.8)
PORTRAIT_RATIO_RANGE = (0.55, 0.57)


class AspectRatio(str, Enum):
    """Coarse aspect-ratio buckets used to group videos in the object store."""

    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"
    OTHER = "other"

    @property
    def prefix(self) -> str:
        """Storage key prefix for videos in this bucket."""
        return {
            AspectRatio.LANDSCAPE: "landscape",
            AspectRatio.PORTRAIT: "portrait",
        }.get(self, "other")


class VideoDimensions(BaseModel, frozen=True):
    """Width and height of a video stream, in pixels."""

    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @property
    def aspect_ratio(self) -> AspectRatio:
        return classify_aspect_ratio(self.width, self.height)


def classify_aspect_ratio(width: int, height: int) -> AspectRatio:
    """
    Buckets a width/height pair into 16:9, 9:16 or other.

    Both bounds are exclusive, so a ratio must fall strictly inside the
    landscape or portrait window to be classified as such.

    Raises:
        ValueError: If either dimension is not positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid dimensions {width}x{height}")

    ratio = width / height
    low, high = LANDSCAPE_RATIO_RANGE
    if low < ratio < high:
        return AspectRatio.LANDSCAPE
    low, high = PORTRAIT_RATIO_RANGE
    if low < ratio < high:
        return AspectRatio.PORTRAIT
    return AspectRatio.OTHER
