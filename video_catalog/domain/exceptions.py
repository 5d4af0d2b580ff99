from video_catalog.domain.entities.video import FieldError


class VideoNotFoundError(ValueError):
    def __init__(self, video_id):
        self.video_id = video_id
        super().__init__(f"Video {video_id} not found")


class VideoValidationError(ValueError):
    """
    Raised when a create or update payload fails one or more field rules.
    Carries every collected error, in the order the rules were checked.
    """
    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Invalid video payload: {fields}")
