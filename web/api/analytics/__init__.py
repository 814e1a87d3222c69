"""Analytics API."""

from web.api.analytics.views import get_analytics, get_events, get_report

__all__ = [
    "get_events",
    "get_analytics",
    "get_report",
]
