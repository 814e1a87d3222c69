"""Allocation preview - live quadratic feedback while a voter distributes credits."""

from collections.abc import Mapping
from dataclasses import dataclass

from app.models.common import BaseEntity
from helpers import formulas


class InvalidAllocationError(ValueError):
    """Allocation cannot be previewed (negative credits or no budget)."""


@dataclass
class AllocationPreview(BaseEntity):
    votes: dict[str, float]
    used: int
    remaining: int
    max_credits: int
    valid: bool


def preview_allocation(allocations: Mapping[str, int], max_credits: int) -> AllocationPreview:
    """Quadratic votes per option and budget usage for a draft allocation."""
    if max_credits <= 0:
        raise InvalidAllocationError(f"max_credits must be positive, got {max_credits}")

    negative = sorted(option_id for option_id, credits in allocations.items() if credits < 0)
    if negative:
        raise InvalidAllocationError(f"Negative credits for options: {', '.join(negative)}")

    used = formulas.total_credits(allocations)
    return AllocationPreview(
        votes=formulas.quadratic_votes(allocations),
        used=used,
        remaining=max_credits - used,
        max_credits=max_credits,
        valid=used <= max_credits,
    )
