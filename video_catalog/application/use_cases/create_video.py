import logging
from typing import Any, Dict, Optional
from video_catalog.application.video_validator import VideoValidator
from video_catalog.domain.entities.video import Video, utc_now
from video_catalog.domain.exceptions import VideoValidationError
from video_catalog.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)


class CreateVideoUseCase:
    def __init__(self, video_repo: VideoRepository, validator: Optional[VideoValidator] = None):
        self.video_repo = video_repo
        self.validator = validator or VideoValidator()

    def execute(self, payload: Dict[str, Any]) -> Video:
        """
        Validates a create payload and stores the new video.
        Raises VideoValidationError with every failed field; nothing is stored then.
        """
        # 1. Validate (collects all errors)
        try:
            fields = self.validator.validate_create(payload)
        except VideoValidationError as e:
            logger.warning(f"Rejected video create: {e}")
            raise

        # 2. Build the entity with a fresh id and creation time
        video = Video(
            id=self.video_repo.next_id(),
            created_at=utc_now(),
            **fields
        )

        self.video_repo.insert(video)
        logger.info(f"Created video {video.id} ({video.title!r})")
        return video
