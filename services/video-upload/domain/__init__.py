"""Domain layer containing business logic and models."""

from .media_type import extension_for_media_type, parse_media_type
from .models import AspectRatio, VideoDimensions, classify_aspect_ratio
from .object_names import random_name, thumbnail_object_name, video_object_name

__all__ = [
    "AspectRatio",
    "VideoDimensions",
    "classify_aspect_ratio",
    "parse_media_type",
    "extension_for_media_type",
    "random_name",
    "thumbnail_object_name",
    "video_object_name",
]
