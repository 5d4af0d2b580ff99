import logging
from typing import Any, Dict, Optional
from video_catalog.application.video_validator import VideoValidator
from video_catalog.domain.entities.video import Video
from video_catalog.domain.exceptions import VideoNotFoundError, VideoValidationError
from video_catalog.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)


class UpdateVideoUseCase:
    def __init__(self, video_repo: VideoRepository, validator: Optional[VideoValidator] = None):
        self.video_repo = video_repo
        self.validator = validator or VideoValidator()

    def execute(self, video_id: int, payload: Dict[str, Any]) -> Video:
        """
        Merges the supplied fields into an existing video.
        Fields missing from the payload keep their stored values; id,
        createdAt and publicationDate are never taken from the payload.
        """
        # 1. Existence check comes before validation
        if not self.video_repo.get_by_id(video_id):
            raise VideoNotFoundError(video_id)

        # 2. Validate (collects all errors, store untouched on failure)
        try:
            changes = self.validator.validate_update(payload)
        except VideoValidationError as e:
            logger.warning(f"Rejected update of video {video_id}: {e}")
            raise

        # 3. Merge against the current record inside the store's lock
        updated = self.video_repo.update(video_id, **changes)
        logger.info(f"Updated video {video_id}: {sorted(changes)}")
        return updated
