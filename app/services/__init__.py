"""Services package - service class exports."""

from app.services.analytics import AnalyticsEngine, EventAnalyticsService
from app.services.export import build_report
from app.services.results import ResultsService
from app.services.voting import preview_allocation

__all__ = [
    "AnalyticsEngine",
    "EventAnalyticsService",
    "ResultsService",
    "build_report",
    "preview_allocation",
]
