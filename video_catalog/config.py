import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# This points to the project root (one level above the package)
BASE_DIR = Path(__file__).resolve().parent.parent

# PROJECT_ROOT for easy reference throughout the app
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", str(BASE_DIR)))

load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000

TRUTHY = {"1", "true", "yes", "on"}


def _split_origins(raw: str) -> list[str]:
    origins = [o.strip() for o in raw.split(",")]
    return [o for o in origins if o] or ["*"]


@dataclass
class Settings:
    api_host: str = DEFAULT_HOST
    api_port: int = DEFAULT_PORT
    log_level: str = "INFO"
    log_file: Optional[str] = None
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    seed_demo_videos: bool = False


def load_settings() -> Settings:
    """
    Builds settings from the environment (.env already loaded above).
    """
    return Settings(
        api_host=os.getenv("API_HOST", DEFAULT_HOST),
        api_port=int(os.getenv("API_PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
        seed_demo_videos=os.getenv("SEED_DEMO_VIDEOS", "false").strip().lower() in TRUTHY,
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
