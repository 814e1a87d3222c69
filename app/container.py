"""Dependency Injection container - initialized at app startup."""

from app.repositories.common.cache import CacheRepository
from app.repositories.event.event import EventRepository
from app.repositories.voting.vote import VoteRepository
from app.services.analytics.engine import AnalyticsEngine
from app.services.analytics.service import EventAnalyticsService
from app.services.results.service import ResultsService


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, conn=None, read_only: bool = False) -> None:
        """Initialize all dependencies. Call once at app startup.

        ``conn`` overrides the settings database (tests use an in-memory one).
        """
        if self._initialized:
            return

        # Repositories (singletons)
        self._event_repo = EventRepository(read_only=read_only, conn=conn)
        self._vote_repo = VoteRepository(read_only=read_only, conn=conn)
        self._cache_repo = CacheRepository(read_only=read_only, conn=conn)

        # Services (with injected repos)
        self.analytics = EventAnalyticsService(
            event_repo=self._event_repo,
            vote_repo=self._vote_repo,
            cache_repo=self._cache_repo,
            engine=AnalyticsEngine(),
        )

        self.results = ResultsService(
            event_repo=self._event_repo,
            vote_repo=self._vote_repo,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        for name in ("_event_repo", "_vote_repo", "_cache_repo", "analytics", "results"):
            self.__dict__.pop(name, None)
        self._initialized = False


# Global container instance
container = Container()
