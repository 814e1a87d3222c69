"""Analytics services - aggregation, network graph, clusters and timeline."""

from app.services.analytics.engine import AnalyticsEngine, EventSnapshot
from app.services.analytics.errors import AnalyticsComputationError, AnalyticsError, MissingEventError
from app.services.analytics.service import EventAnalyticsService

__all__ = [
    "AnalyticsEngine",
    "EventSnapshot",
    "EventAnalyticsService",
    "AnalyticsError",
    "AnalyticsComputationError",
    "MissingEventError",
]
