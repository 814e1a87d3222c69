"""Results domain models - decision framework outcomes."""

from app.models.results.entities import (
    BinaryResults,
    Distribution,
    EventResults,
    FrameworkType,
    OptionTally,
    Participation,
    ProportionalResults,
    RankedOption,
    ThresholdMode,
)

__all__ = [
    "FrameworkType",
    "ThresholdMode",
    "OptionTally",
    "RankedOption",
    "BinaryResults",
    "Distribution",
    "ProportionalResults",
    "Participation",
    "EventResults",
]
