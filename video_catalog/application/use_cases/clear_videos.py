import logging
from video_catalog.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)


class ClearVideosUseCase:
    """
    Testing hook: drops every stored video.
    """
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self) -> None:
        self.video_repo.clear()
        logger.info("All videos removed")
