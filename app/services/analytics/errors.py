"""Analytics errors."""


class AnalyticsError(Exception):
    """Base class for analytics failures."""


class MissingEventError(AnalyticsError):
    """The store has no event with the requested id."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")


class AnalyticsComputationError(AnalyticsError):
    """A computation stage failed; no partial result is produced."""

    def __init__(self, stage: str, cause: BaseException):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Analytics stage '{stage}' failed: {cause}")
