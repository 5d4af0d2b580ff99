import logging
import math
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from video_catalog.api.v1.schemas.video import ErrorsMessagesResponse, VideoResponse
from video_catalog.application.use_cases.clear_videos import ClearVideosUseCase
from video_catalog.application.use_cases.create_video import CreateVideoUseCase
from video_catalog.application.use_cases.delete_video import DeleteVideoUseCase
from video_catalog.application.use_cases.get_video import GetVideoByIdUseCase
from video_catalog.application.use_cases.list_videos import ListVideosUseCase
from video_catalog.application.use_cases.update_video import UpdateVideoUseCase
from video_catalog.application.video_validator import to_number
from video_catalog.domain.exceptions import VideoNotFoundError, VideoValidationError
from video_catalog.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/videos", tags=["Videos"])

# Wire up the dependencies
def get_video_repository(request: Request) -> VideoRepository:
    return request.app.state.video_repository

def list_videos_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return ListVideosUseCase(repo)

def get_video_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return GetVideoByIdUseCase(repo)

def create_video_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return CreateVideoUseCase(repo)

def update_video_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return UpdateVideoUseCase(repo)

def delete_video_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return DeleteVideoUseCase(repo)

def clear_videos_use_case(repo: VideoRepository = Depends(get_video_repository)):
    return ClearVideosUseCase(repo)


def parse_video_id(raw: str) -> Optional[int]:
    """Numeric path ids ("1", "1.0", "1e0") resolve to their integer; anything else matches nothing."""
    number = to_number(raw)
    if math.isnan(number) or not number.is_integer():
        return None
    return int(number)


def not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def validation_failed(error: VideoValidationError) -> JSONResponse:
    body = ErrorsMessagesResponse.from_errors(error.errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(by_alias=True))


@router.get("", response_model=List[VideoResponse])
async def list_videos(use_case: ListVideosUseCase = Depends(list_videos_use_case)):
    return [VideoResponse.from_entity(v) for v in use_case.execute()]

@router.post("", status_code=status.HTTP_201_CREATED, response_model=VideoResponse)
async def create_video(
    payload: Dict[str, Any] = Body(..., description="Video fields, without id"),
    use_case: CreateVideoUseCase = Depends(create_video_use_case)
):
    try:
        video = use_case.execute(payload)
        return VideoResponse.from_entity(video)
    except VideoValidationError as e:
        return validation_failed(e)
    except Exception as e:
        logger.exception(f"Create Video API Error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.delete("/testing/all-data", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_videos(use_case: ClearVideosUseCase = Depends(clear_videos_use_case)):
    """
    Testing hook: empties the store.
    """
    use_case.execute()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(
    video_id: str,
    use_case: GetVideoByIdUseCase = Depends(get_video_use_case)
):
    parsed_id = parse_video_id(video_id)
    if parsed_id is None:
        return not_found()

    try:
        return VideoResponse.from_entity(use_case.execute(parsed_id))
    except VideoNotFoundError:
        return not_found()

@router.put("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_video(
    video_id: str,
    payload: Dict[str, Any] = Body(..., description="Fields to merge into the stored video"),
    use_case: UpdateVideoUseCase = Depends(update_video_use_case)
):
    """
    Update a video. Title and author are always required; other fields
    are merged only when supplied.
    """
    parsed_id = parse_video_id(video_id)
    if parsed_id is None:
        return not_found()

    try:
        use_case.execute(parsed_id, payload)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except VideoNotFoundError:
        return not_found()
    except VideoValidationError as e:
        return validation_failed(e)
    except Exception as e:
        logger.exception(f"Update Video API Error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_video(
    video_id: str,
    use_case: DeleteVideoUseCase = Depends(delete_video_use_case)
):
    parsed_id = parse_video_id(video_id)
    if parsed_id is None:
        return not_found()

    try:
        use_case.execute(parsed_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except VideoNotFoundError:
        return not_found()
