"""Results API."""

from web.api.results.views import get_allocation_preview, get_results

__all__ = [
    "get_results",
    "get_allocation_preview",
]
