"""Results services - binary selection and proportional distribution."""

from app.services.results.frameworks import (
    UnknownFrameworkError,
    UnknownThresholdModeError,
    binary_selection,
    gini_coefficient,
    proportional_distribution,
    tally_votes,
)
from app.services.results.service import ResultsService

__all__ = [
    "ResultsService",
    "binary_selection",
    "proportional_distribution",
    "tally_votes",
    "gini_coefficient",
    "UnknownFrameworkError",
    "UnknownThresholdModeError",
]
