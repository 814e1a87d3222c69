"""Results API views - thin layer over services."""

from app.container import container
from app.services.analytics import MissingEventError
from app.services.results import UnknownFrameworkError, UnknownThresholdModeError
from app.services.voting import InvalidAllocationError, preview_allocation
from web.api.errors import NotFoundError, ValidationError, validate_event_id

from .schemas import AllocationPreviewRequest, AllocationPreviewResponse, ParticipationItem, ResultsResponse


def get_results(event_id: str) -> ResultsResponse:
    """Get current results under the event's decision framework."""
    event_id = validate_event_id(event_id)
    try:
        data = container.results.event_results(event_id)
    except MissingEventError as e:
        raise NotFoundError(f"Event not found: {e.event_id}") from e
    except (UnknownFrameworkError, UnknownThresholdModeError) as e:
        raise ValidationError(str(e)) from e

    return ResultsResponse(
        event_id=data.event_id,
        framework_type=data.framework_type.value,
        results=data.results.to_json_dict(),
        participation=ParticipationItem.model_validate(data.participation),
        calculated_at=data.calculated_at,
    )


def get_allocation_preview(request: AllocationPreviewRequest) -> AllocationPreviewResponse:
    """Live quadratic feedback for a draft allocation."""
    try:
        data = preview_allocation(request.allocations, request.max_credits)
    except InvalidAllocationError as e:
        raise ValidationError(str(e)) from e

    return AllocationPreviewResponse.model_validate(data)
