"""Video upload endpoint."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from tubely_common.logging import setup_logging

from dependencies import get_current_user_id, get_video_handler
from exceptions import (
    InvalidMediaTypeError,
    MediaProbeError,
    NotVideoOwnerError,
    StorageUploadError,
    TempFileError,
    UnsupportedMediaTypeError,
    VideoLookupError,
    VideoNotFoundError,
    VideoUpdateError,
)
from handlers import VideoUploadHandler
from response_models import VideoResponse

from .limits import body_limited_route
from .params import parse_video_id

logger = setup_logging()

router = APIRouter(
    prefix="/api",
    tags=["videos"],
    route_class=body_limited_route(lambda config: config.videos.max_upload_bytes),
)

VideoIdDep = Annotated[UUID, Depends(parse_video_id)]
UserIdDep = Annotated[UUID, Depends(get_current_user_id)]
HandlerDep = Annotated[VideoUploadHandler, Depends(get_video_handler)]


@router.post("/video_upload/{video_id}", response_model=VideoResponse)
def upload_video(
    video_id: VideoIdDep,
    user_id: UserIdDep,
    handler: HandlerDep,
    video: UploadFile | None = File(None),
) -> VideoResponse:
    """
    Uploads an MP4 file for a video.

    The file is probed for its aspect ratio, stored in the object store under
    a landscape/portrait/other prefix and linked from the video record.
    """
    logger.info(
        "Uploading video",
        extra={"video_id": str(video_id), "user_id": str(user_id)},
    )

    if video is None:
        raise HTTPException(status_code=400, detail="Unable to get file from form")

    try:
        updated = handler.process(
            video_id=video_id,
            user_id=user_id,
            data=video.file,
            content_type=video.content_type,
        )
    except VideoNotFoundError:
        raise HTTPException(status_code=404, detail="Video not found")
    except NotVideoOwnerError:
        raise HTTPException(status_code=401, detail="Unauthorized")
    except (InvalidMediaTypeError, UnsupportedMediaTypeError):
        raise HTTPException(status_code=400, detail="Invalid media type")
    except TempFileError:
        raise HTTPException(status_code=500, detail="Unable to save file")
    except MediaProbeError:
        raise HTTPException(status_code=500, detail="Unable to get video aspect ratio")
    except StorageUploadError:
        raise HTTPException(status_code=500, detail="Unable to upload to object store")
    except VideoLookupError:
        raise HTTPException(status_code=500, detail="Unable to load video")
    except VideoUpdateError:
        raise HTTPException(status_code=500, detail="Unable to update video")

    return VideoResponse.model_validate(updated)
