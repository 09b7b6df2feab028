"""Response models for the video-upload API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class VideoResponse(BaseModel):
    """Video metadata returned after a successful upload."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime
    title: str
    description: str
    thumbnail_url: str | None = None
    video_url: str | None = None
    user_id: UUID
