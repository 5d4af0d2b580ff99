import pytest
from fastapi.testclient import TestClient

from server import create_app
from video_catalog.config import Settings
from video_catalog.infrastructure.repositories.in_memory_video_repository import InMemoryVideoRepository


@pytest.fixture
def repository():
    """A fresh, empty store per test."""
    return InMemoryVideoRepository()


@pytest.fixture
def client(repository):
    app = create_app(repository=repository, settings=Settings())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_video():
    """A valid create payload."""
    return {
        "title": "Intro to FastAPI",
        "author": "Jane Doe",
        "availableResolutions": ["P144", "P360"],
    }
