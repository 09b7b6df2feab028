"""Shared path parameter parsing."""

from uuid import UUID

from fastapi import HTTPException


def parse_video_id(video_id: str) -> UUID:
    """Parses the ``video_id`` path segment, answering 400 when it is not a UUID."""
    try:
        return UUID(video_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid ID")
