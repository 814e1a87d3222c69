"""API errors and validation helpers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


MAX_EVENT_ID_LENGTH = 64


def validate_event_id(event_id: str) -> str:
    """Validate event_id is a non-blank identifier and return it stripped."""
    if not isinstance(event_id, str) or not event_id.strip():
        raise ValidationError("Invalid event_id: must be a non-empty string")
    event_id = event_id.strip()
    if len(event_id) > MAX_EVENT_ID_LENGTH:
        raise ValidationError(f"Invalid event_id: longer than {MAX_EVENT_ID_LENGTH} characters")
    return event_id
