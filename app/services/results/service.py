"""Results service - decision framework outcome for an event."""

from datetime import datetime, timezone

from loguru import logger

from app.models.results import EventResults, FrameworkType, Participation
from app.repositories.event import EventRepository
from app.repositories.voting import VoteRepository
from app.services.analytics.errors import MissingEventError
from app.services.results.frameworks import (
    UnknownFrameworkError,
    binary_selection,
    proportional_distribution,
    tally_votes,
)


class ResultsService:
    """Current results of an event under its decision framework."""

    def __init__(self, event_repo: EventRepository, vote_repo: VoteRepository):
        self._events = event_repo
        self._votes = vote_repo

    def event_results(self, event_id: str, now: datetime | None = None) -> EventResults:
        event = self._events.get_event(event_id)
        if event is None:
            raise MissingEventError(event_id)

        options = self._events.list_options_for_event(event_id)
        votes = self._votes.list_votes_for_event(event_id)
        tallies = tally_votes(options, votes)

        framework = event.decision_framework or {}
        config = framework.get("config") or {}
        try:
            framework_type = FrameworkType(framework.get("framework_type"))
        except ValueError as e:
            raise UnknownFrameworkError(f"Unknown framework type: {framework.get('framework_type')}") from e

        if framework_type is FrameworkType.BINARY_SELECTION:
            results = binary_selection(tallies, config)
        else:
            results = proportional_distribution(tallies, config)

        now = now or datetime.now(timezone.utc)
        logger.info("Computed {} results for event {}", framework_type.value, event_id)
        return EventResults(
            event_id=event_id,
            framework_type=framework_type,
            results=results,
            participation=Participation(
                total_voters=len(votes),
                total_credits_allocated=sum(v.total_credits_used for v in votes),
                voting_start=event.start_time,
                voting_end=event.end_time,
                is_final=event.end_time is not None and now > event.end_time,
            ),
            calculated_at=now,
        )
