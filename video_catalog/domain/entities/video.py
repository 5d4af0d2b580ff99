from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Union

PUBLICATION_DELAY = timedelta(hours=24)


class Resolution(str, Enum):
    P144 = 'P144'
    P240 = 'P240'
    P360 = 'P360'
    P480 = 'P480'
    P720 = 'P720'
    P1080 = 'P1080'
    P1440 = 'P1440'
    P2160 = 'P2160'

    @classmethod
    def values(cls) -> set[str]:
        return {r.value for r in cls}


@dataclass(frozen=True)
class FieldError:
    message: str
    field: str


@dataclass(frozen=True)
class Video:
    id: int
    title: str
    author: str
    created_at: datetime
    can_be_downloaded: bool = False
    min_age_restriction: Optional[Union[int, float]] = None
    available_resolutions: Optional[list[str]] = None

    @property
    def publication_date(self) -> datetime:
        return self.created_at + PUBLICATION_DELAY


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso(value: datetime) -> str:
    """
    Formats a timestamp as ISO-8601 UTC with millisecond precision,
    e.g. 2024-01-01T10:00:00.000Z.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
