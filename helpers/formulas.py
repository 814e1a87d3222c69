"""Pure math formulas - no dependencies, easily testable."""

import math
from collections.abc import Collection, Mapping
from datetime import datetime, timezone
from typing import Any

SIGNATURE_DELIMITER = ","


def quadratic_score(credits: int) -> float:
    """Quadratic vote weight: sqrt(credits).

    Single source of the formula for the live allocation preview and the
    server-side aggregation. Callers reject negative credits beforehand.
    """
    return math.sqrt(credits)


def quadratic_votes(allocations: Mapping[str, int]) -> dict[str, float]:
    """Quadratic weight per option for one allocation map."""
    return {option_id: quadratic_score(credits) for option_id, credits in allocations.items()}


def is_credit_amount(value: Any) -> bool:
    """Credits are whole numbers; floats, strings and booleans are not."""
    return isinstance(value, int) and not isinstance(value, bool)


def total_credits(allocations: Mapping[str, int]) -> int:
    """Sum of credits in an allocation map. Entries that are not credit amounts count as 0."""
    return sum(credits for credits in allocations.values() if is_credit_amount(credits))


def allocation_signature(allocations: Mapping[str, int], known: Collection[str] | None = None) -> str:
    """Sorted, comma-joined ids of options funded with > 0 credits.

    With ``known`` given, ids outside it are left out of the signature.
    """
    funded = sorted(
        str(option_id)
        for option_id, credits in allocations.items()
        if is_credit_amount(credits) and credits > 0 and (known is None or option_id in known)
    )
    return SIGNATURE_DELIMITER.join(funded)


def truncate_to_hour(moment: datetime) -> datetime:
    """Start of the UTC hour containing ``moment``. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.replace(minute=0, second=0, microsecond=0)


def hash_string(value: str) -> str:
    """Polynomial rolling hash (h * 31 + code unit) over 32 bits, as hex of the absolute value.

    NOT a security measure: it only masks raw IP strings in displayed and
    exported analytics while keeping a stable grouping key. Collisions are
    expected and the input space of IPv4 addresses is small enough to brute force.
    """
    h = 0
    units = value.encode("utf-16-le")
    for i in range(0, len(units), 2):
        code = units[i] | (units[i + 1] << 8)
        h = ((h << 5) - h + code) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return format(abs(h), "x")


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator, or 0.0 when the denominator is 0."""
    return numerator / denominator if denominator else 0.0
