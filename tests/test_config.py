import logging

from server import create_app
from video_catalog.config import Settings, load_settings
from video_catalog.infrastructure.demo_seed import seed_demo_videos
from video_catalog.logging_config import setup_logging


def test_defaults(monkeypatch):
    for name in ("API_HOST", "API_PORT", "LOG_LEVEL", "LOG_FILE", "CORS_ORIGINS", "SEED_DEMO_VIDEOS"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings == Settings()
    assert settings.api_port == 5000
    assert settings.cors_origins == ["*"]
    assert settings.seed_demo_videos is False


def test_from_environment(monkeypatch):
    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", "logs/app.log")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("SEED_DEMO_VIDEOS", "yes")

    settings = load_settings()

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "logs/app.log"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.seed_demo_videos is True


def test_seed_demo_videos(repository):
    seeded = seed_demo_videos(repository)

    assert [v.title for v in repository.list_all()] == ["video1", "video2", "video3"]
    assert [v.min_age_restriction for v in seeded] == [None, 18, 5]
    assert len({v.id for v in seeded}) == 3


def test_app_seeds_when_enabled(repository):
    create_app(repository=repository, settings=Settings(seed_demo_videos=True))
    assert len(repository.list_all()) == 3


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "catalog.log"
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging("DEBUG", str(log_file))
        logging.getLogger("video_catalog.test").debug("hello")
        for handler in root.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
