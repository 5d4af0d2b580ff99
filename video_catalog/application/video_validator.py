import math
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from video_catalog.domain.entities.video import FieldError, Resolution
from video_catalog.domain.exceptions import VideoValidationError

# Config / Constants
TITLE_MAX_LENGTH = 40
AUTHOR_MAX_LENGTH = 20
MIN_AGE = 1
MAX_AGE = 18
PUBLICATION_DATE_PATTERN = re.compile(r"[1-9]\d{3}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z")
PUBLICATION_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

TITLE_ERROR = f"Missing title or title length greater than {TITLE_MAX_LENGTH} characters"
AUTHOR_ERROR = f"Missing author or author length greater than {AUTHOR_MAX_LENGTH} characters"
RESOLUTIONS_ERROR = "No resolution provided or incorrect resolutions provided"
CAN_BE_DOWNLOADED_ERROR = "Incorrect canBeDownloaded value type"
MIN_AGE_ERROR = f"Age should be null or between {MIN_AGE} and {MAX_AGE}"
PUBLICATION_DATE_ERROR = "Incorrect date format"

# Payload keys that an update may overwrite, mapped to entity attributes
MUTABLE_FIELDS = {
    "title": "title",
    "author": "author",
    "canBeDownloaded": "can_be_downloaded",
    "minAgeRestriction": "min_age_restriction",
    "availableResolutions": "available_resolutions",
}

Number = Union[int, float]


def to_number(value: Any) -> float:
    """
    Loose numeric coercion used for minAgeRestriction.
    null and blank strings become 0, booleans 0/1, unparseable input NaN.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return math.nan
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return math.nan
    else:
        return math.nan
    return number if math.isfinite(number) else math.nan


def _compact(number: float) -> Number:
    return int(number) if number.is_integer() else number


class VideoValidator:
    """
    Applies the video field rules to raw JSON payloads.

    Every rule runs before a decision is made, so a rejected payload reports
    all of its problems at once. On success the validator returns the
    normalized fields keyed by entity attribute name.
    """

    def validate_create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        errors = self._common_errors(payload)
        if errors:
            raise VideoValidationError(errors)

        age = to_number(payload.get("minAgeRestriction"))
        return {
            "title": payload["title"],
            "author": payload["author"],
            "can_be_downloaded": bool(payload.get("canBeDownloaded")),
            "min_age_restriction": None if math.isnan(age) or age == 0 else _compact(age),
            "available_resolutions": self._resolutions(payload.get("availableResolutions")),
        }

    def validate_update(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        errors = self._common_errors(payload)

        if "canBeDownloaded" in payload and not isinstance(payload["canBeDownloaded"], bool):
            errors.append(FieldError(CAN_BE_DOWNLOADED_ERROR, "canBeDownloaded"))

        age: Optional[float] = None
        if payload.get("minAgeRestriction") is not None:
            age = to_number(payload["minAgeRestriction"])
            if math.isnan(age) or (age != 0 and not MIN_AGE <= age <= MAX_AGE):
                errors.append(FieldError(MIN_AGE_ERROR, "minAgeRestriction"))

        if payload.get("publicationDate") is not None and not self._is_publication_date(payload["publicationDate"]):
            errors.append(FieldError(PUBLICATION_DATE_ERROR, "publicationDate"))

        if errors:
            raise VideoValidationError(errors)

        changes = {
            attr: payload[key]
            for key, attr in MUTABLE_FIELDS.items()
            if key in payload
        }
        if "min_age_restriction" in changes:
            changes["min_age_restriction"] = _compact(age) if age else None
        if "available_resolutions" in changes:
            changes["available_resolutions"] = self._resolutions(changes["available_resolutions"])
        return changes

    def _common_errors(self, payload: Dict[str, Any]) -> List[FieldError]:
        errors = []
        if not self._is_bounded_text(payload.get("title"), TITLE_MAX_LENGTH):
            errors.append(FieldError(TITLE_ERROR, "title"))
        if not self._is_bounded_text(payload.get("author"), AUTHOR_MAX_LENGTH):
            errors.append(FieldError(AUTHOR_ERROR, "author"))

        resolutions = payload.get("availableResolutions")
        if resolutions is not None and not self._is_resolution_list(resolutions):
            errors.append(FieldError(RESOLUTIONS_ERROR, "availableResolutions"))
        return errors

    @staticmethod
    def _is_bounded_text(value: Any, max_length: int) -> bool:
        return isinstance(value, str) and 0 < len(value) <= max_length

    @staticmethod
    def _is_resolution_list(value: Any) -> bool:
        if not isinstance(value, list) or not value:
            return False
        allowed = Resolution.values()
        return all(isinstance(item, str) and item in allowed for item in value)

    @staticmethod
    def _is_publication_date(value: Any) -> bool:
        if not isinstance(value, str) or not PUBLICATION_DATE_PATTERN.fullmatch(value):
            return False
        try:
            datetime.strptime(value, PUBLICATION_DATE_FORMAT)
        except ValueError:
            return False
        return True

    @staticmethod
    def _resolutions(value: Optional[List[str]]) -> Optional[List[str]]:
        return list(value) if value is not None else None
