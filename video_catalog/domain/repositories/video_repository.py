from abc import ABC, abstractmethod
from typing import Optional
from video_catalog.domain.entities.video import Video

class VideoRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[Video]:
        pass

    @abstractmethod
    def get_by_id(self, video_id: int) -> Optional[Video]:
        pass

    @abstractmethod
    def next_id(self) -> int:
        pass

    @abstractmethod
    def insert(self, video: Video) -> Video:
        pass

    @abstractmethod
    def replace(self, video_id: int, video: Video) -> Video:
        pass

    @abstractmethod
    def update(self, video_id: int, **changes) -> Video:
        pass

    @abstractmethod
    def delete_by_id(self, video_id: int) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
