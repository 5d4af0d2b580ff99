from video_catalog.domain.entities.video import Video
from video_catalog.domain.repositories.video_repository import VideoRepository

class ListVideosUseCase:
    def __init__(self, video_repo: VideoRepository):
        self.video_repo = video_repo

    def execute(self) -> list[Video]:
        # Whole collection in insertion order, no paging
        return self.video_repo.list_all()
