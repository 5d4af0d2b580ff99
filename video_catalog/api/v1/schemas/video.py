from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from video_catalog.domain.entities.video import FieldError, Video, to_iso


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoResponse(CamelModel):
    id: int
    title: str
    author: str
    can_be_downloaded: bool
    min_age_restriction: Optional[Union[int, float]] = None
    created_at: str
    publication_date: str
    available_resolutions: Optional[List[str]] = None

    @classmethod
    def from_entity(cls, video: Video) -> "VideoResponse":
        return cls(
            id=video.id,
            title=video.title,
            author=video.author,
            can_be_downloaded=video.can_be_downloaded,
            min_age_restriction=video.min_age_restriction,
            created_at=to_iso(video.created_at),
            publication_date=to_iso(video.publication_date),
            available_resolutions=video.available_resolutions,
        )


class FieldErrorResponse(BaseModel):
    message: str
    field: str


class ErrorsMessagesResponse(CamelModel):
    errors_messages: List[FieldErrorResponse]

    @classmethod
    def from_errors(cls, errors: List[FieldError]) -> "ErrorsMessagesResponse":
        return cls(errors_messages=[FieldErrorResponse(message=e.message, field=e.field) for e in errors])
