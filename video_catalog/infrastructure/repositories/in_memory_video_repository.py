import dataclasses
import itertools
import logging
import threading
from typing import Optional
from video_catalog.domain.entities.video import Video
from video_catalog.domain.exceptions import VideoNotFoundError
from video_catalog.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)


class InMemoryVideoRepository(VideoRepository):
    """
    Insertion-ordered list of videos guarded by a single lock.
    Entities are frozen, so replacing one never exposes a half-written record.
    """
    def __init__(self):
        self._videos: list[Video] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def list_all(self) -> list[Video]:
        with self._lock:
            return list(self._videos)

    def get_by_id(self, video_id: int) -> Optional[Video]:
        with self._lock:
            index = self._index_of(video_id)
            return self._videos[index] if index is not None else None

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def insert(self, video: Video) -> Video:
        with self._lock:
            self._videos.append(video)
        logger.debug(f"Inserted video {video.id}")
        return video

    def replace(self, video_id: int, video: Video) -> Video:
        with self._lock:
            index = self._index_of(video_id)
            if index is None:
                raise VideoNotFoundError(video_id)
            self._videos[index] = video
        logger.debug(f"Replaced video {video_id}")
        return video

    def update(self, video_id: int, **changes) -> Video:
        """
        Read, merge and write in one critical section so concurrent
        updates of the same video never drop each other's fields.
        """
        with self._lock:
            index = self._index_of(video_id)
            if index is None:
                raise VideoNotFoundError(video_id)
            updated = dataclasses.replace(self._videos[index], **changes)
            self._videos[index] = updated
        logger.debug(f"Updated video {video_id}: {sorted(changes)}")
        return updated

    def delete_by_id(self, video_id: int) -> None:
        with self._lock:
            index = self._index_of(video_id)
            if index is None:
                raise VideoNotFoundError(video_id)
            del self._videos[index]
        logger.debug(f"Deleted video {video_id}")

    def clear(self) -> None:
        with self._lock:
            count = len(self._videos)
            self._videos.clear()
        logger.debug(f"Cleared {count} videos")

    # Caller must hold the lock
    def _index_of(self, video_id: int) -> Optional[int]:
        for index, video in enumerate(self._videos):
            if video.id == video_id:
                return index
        return None
