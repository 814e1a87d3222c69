"""Voting services - allocation preview."""

from app.services.voting.preview import AllocationPreview, InvalidAllocationError, preview_allocation

__all__ = [
    "AllocationPreview",
    "InvalidAllocationError",
    "preview_allocation",
]
