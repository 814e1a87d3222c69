"""Analytics API views - thin layer over services."""

from app.container import container
from app.services.analytics import MissingEventError
from app.services.export import build_report
from web.api.errors import NotFoundError, validate_event_id

from .schemas import AnalyticsResponse, EventItem, EventsResponse, ReportResponse


def get_events() -> EventsResponse:
    """Get all events."""
    data = container.analytics.list_events()
    return EventsResponse(items=[EventItem.model_validate(e) for e in data])


def get_analytics(event_id: str, refresh: bool = True) -> AnalyticsResponse:
    """Get analytics for an event; ``refresh=False`` allows a cached copy."""
    event_id = validate_event_id(event_id)
    try:
        data = container.analytics.event_analytics(event_id, use_cache=not refresh)
    except MissingEventError as e:
        raise NotFoundError(f"Event not found: {e.event_id}") from e

    return AnalyticsResponse.model_validate(data)


def get_report(event_id: str) -> ReportResponse:
    """Get the CSV report for an event."""
    event_id = validate_event_id(event_id)
    try:
        data = container.analytics.event_analytics(event_id)
    except MissingEventError as e:
        raise NotFoundError(f"Event not found: {e.event_id}") from e

    return ReportResponse(
        event_id=event_id,
        filename=f"analytics-{event_id}.csv",
        content=build_report(data),
    )
