import logging
from video_catalog.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)


class DeleteVideoUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self, video_id: int) -> None:
        # Raises VideoNotFoundError when the id is unknown
        self.video_repo.delete_by_id(video_id)
        logger.info(f"Deleted video {video_id}")
