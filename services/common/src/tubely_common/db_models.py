from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True)
    created_at: datetime = Field(default_factory=_utcnow)

    videos: List["Video"] = Relationship(back_populates="user")


class Video(SQLModel, table=True):
    __tablename__ = "videos"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
    title: str = Field(max_length=255)
    description: str = ""
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None
    user_id: UUID = Field(foreign_key="users.id", index=True)

    user: Optional[User] = Relationship(back_populates="videos")
