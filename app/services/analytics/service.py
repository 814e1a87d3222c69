"""Event analytics service."""

from loguru import logger

from app.models.event import Event
from app.models.voting import EventAnalytics
from app.repositories.common import CacheRepository
from app.repositories.event import EventRepository
from app.repositories.voting import VoteRepository
from app.services.analytics.engine import AnalyticsEngine, EventSnapshot
from app.services.analytics.errors import MissingEventError

CACHE_KEY = "analytics"


class EventAnalyticsService:
    """Reads an event snapshot from the store and runs the analytics engine."""

    def __init__(
        self,
        event_repo: EventRepository,
        vote_repo: VoteRepository,
        cache_repo: CacheRepository | None = None,
        engine: AnalyticsEngine | None = None,
    ):
        self._events = event_repo
        self._votes = vote_repo
        self._cache = cache_repo
        self._engine = engine or AnalyticsEngine()
        logger.debug("EventAnalyticsService initialized")

    def list_events(self) -> list[Event]:
        return self._events.list_events()

    def snapshot(self, event_id: str) -> EventSnapshot:
        """Read event, options and votes once."""
        event = self._events.get_event(event_id)
        if event is None:
            logger.warning("No event {}", event_id)
            raise MissingEventError(event_id)

        return EventSnapshot(
            event=event,
            options=tuple(self._events.list_options_for_event(event_id)),
            votes=tuple(self._votes.list_votes_for_event(event_id)),
            proposals=self._events.get_proposal_stats(event_id),
            invites=self._events.get_invite_stats(event_id),
        )

    def event_analytics(self, event_id: str, use_cache: bool = False) -> EventAnalytics:
        """Analytics for an event; fresh unless ``use_cache`` and a cached copy exists."""
        if use_cache and self._cache is not None:
            cached = self._cache.get(event_id, CACHE_KEY)
            if cached is not None:
                return EventAnalytics.from_dict(cached)

        result = self._engine.compute(self.snapshot(event_id))

        if use_cache and self._cache is not None:
            self._cache.set(event_id, CACHE_KEY, result.to_json_dict())
        return result

    def precompute(self, event_id: str) -> EventAnalytics:
        """Compute and write analytics through to the cache."""
        if self._cache is None:
            raise RuntimeError("No cache repository configured")

        logger.info("Precomputing analytics for event {}...", event_id)
        result = self._engine.compute(self.snapshot(event_id))
        self._cache.set(event_id, CACHE_KEY, result.to_json_dict())
        logger.info("Analytics cached for event {}", event_id)
        return result
