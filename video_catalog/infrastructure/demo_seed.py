import logging
from video_catalog.domain.entities.video import Video, utc_now
from video_catalog.domain.repositories.video_repository import VideoRepository

logger = logging.getLogger(__name__)

DEMO_VIDEOS = [
    {
        "title": "video1",
        "author": "author1",
        "can_be_downloaded": False,
        "min_age_restriction": None,
        "available_resolutions": ["P144", "P360"],
    },
    {
        "title": "video2",
        "author": "author2",
        "can_be_downloaded": True,
        "min_age_restriction": 18,
        "available_resolutions": ["P144", "P480"],
    },
    {
        "title": "video3",
        "author": "author3",
        "can_be_downloaded": False,
        "min_age_restriction": 5,
        "available_resolutions": ["P144", "P360", "P720"],
    },
]


def seed_demo_videos(video_repo: VideoRepository) -> list[Video]:
    """
    Fills the store with the demo records used when SEED_DEMO_VIDEOS is on.
    """
    seeded = []
    for data in DEMO_VIDEOS:
        fields = {**data, "available_resolutions": list(data["available_resolutions"])}
        video = Video(id=video_repo.next_id(), created_at=utc_now(), **fields)
        seeded.append(video_repo.insert(video))

    logger.info(f"Seeded {len(seeded)} demo videos")
    return seeded
