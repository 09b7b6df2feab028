"""Thumbnail upload and retrieval endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile
from tubely_common.logging import setup_logging

from dependencies import (
    get_current_user_id,
    get_memory_storage,
    get_thumbnail_handler,
)
from exceptions import (
    InvalidMediaTypeError,
    NotVideoOwnerError,
    StorageUploadError,
    UnsupportedMediaTypeError,
    VideoLookupError,
    VideoNotFoundError,
    VideoUpdateError,
)
from handlers import ThumbnailUploadHandler
from infrastructure import InMemoryStorage
from response_models import VideoResponse

from .limits import body_limited_route
from .params import parse_video_id

logger = setup_logging()

router = APIRouter(
    prefix="/api",
    tags=["thumbnails"],
    route_class=body_limited_route(lambda config: config.thumbnails.max_upload_bytes),
)

VideoIdDep = Annotated[UUID, Depends(parse_video_id)]
UserIdDep = Annotated[UUID, Depends(get_current_user_id)]
HandlerDep = Annotated[ThumbnailUploadHandler, Depends(get_thumbnail_handler)]
MemoryStorageDep = Annotated[InMemoryStorage, Depends(get_memory_storage)]


@router.post("/thumbnail_upload/{video_id}", response_model=VideoResponse)
def upload_thumbnail(
    video_id: VideoIdDep,
    user_id: UserIdDep,
    handler: HandlerDep,
    thumbnail: UploadFile | None = File(None),
) -> VideoResponse:
    """
    Uploads a thumbnail image for a video.

    Stores the image with the configured backend and sets the video's
    thumbnail URL.
    """
    logger.info(
        "Uploading thumbnail",
        extra={"video_id": str(video_id), "user_id": str(user_id)},
    )

    if thumbnail is None:
        raise HTTPException(status_code=400, detail="Unable to get file from form")

    try:
        video = handler.process(
            video_id=video_id,
            user_id=user_id,
            data=thumbnail.file,
            content_type=thumbnail.content_type,
        )
    except InvalidMediaTypeError:
        raise HTTPException(status_code=400, detail="Invalid media type")
    except UnsupportedMediaTypeError:
        raise HTTPException(status_code=400, detail="Unsupported media type")
    except VideoNotFoundError:
        raise HTTPException(status_code=404, detail="Video not found")
    except NotVideoOwnerError:
        raise HTTPException(status_code=401, detail="Unauthorized")
    except StorageUploadError:
        raise HTTPException(status_code=500, detail="Unable to save file")
    except VideoLookupError:
        raise HTTPException(status_code=500, detail="Unable to load video")
    except VideoUpdateError:
        raise HTTPException(status_code=500, detail="Unable to update video")

    return VideoResponse.model_validate(video)


@router.get("/thumbnails/{video_id}")
def get_thumbnail(video_id: VideoIdDep, storage: MemoryStorageDep) -> Response:
    """Serves the thumbnail the in-memory backend holds for a video."""
    asset = storage.get(str(video_id))
    if asset is None:
        raise HTTPException(status_code=404, detail="Thumbnail not found")
    return Response(content=asset.data, media_type=asset.content_type)
