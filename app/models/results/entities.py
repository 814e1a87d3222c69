"""Results domain entities - decision framework outcomes."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from app.models.common import BaseEntity


class FrameworkType(str, Enum):
    BINARY_SELECTION = "binary_selection"
    PROPORTIONAL_DISTRIBUTION = "proportional_distribution"


class ThresholdMode(str, Enum):
    TOP_N = "top_n"
    PERCENTAGE = "percentage"
    ABSOLUTE_VOTES = "absolute_votes"
    ABOVE_AVERAGE = "above_average"


@dataclass
class OptionTally(BaseEntity):
    """Quadratic votes of one option: each voter's sqrt(credits), summed."""

    option_id: str
    title: str
    votes: float = 0.0
    voters: int = 0


@dataclass
class RankedOption(BaseEntity):
    """Option with its quadratic score, rank and selection flag."""

    option_id: str
    title: str
    votes: float
    rank: int
    selected: bool


@dataclass
class BinaryResults(BaseEntity):
    threshold_mode: ThresholdMode
    selected_options: list[RankedOption] = field(default_factory=list)
    not_selected_options: list[RankedOption] = field(default_factory=list)
    selected_count: int = 0
    selection_margin: float | None = None
    framework_type: FrameworkType = FrameworkType.BINARY_SELECTION


@dataclass
class Distribution(BaseEntity):
    """Share of the resource pool given to one option."""

    option_id: str
    title: str
    votes: float
    allocation_amount: float
    allocation_percentage: float


@dataclass
class ProportionalResults(BaseEntity):
    resource_name: str
    resource_symbol: str
    total_pool: float
    distributions: list[Distribution] = field(default_factory=list)
    total_allocated: float = 0.0
    gini_coefficient: float = 0.0
    framework_type: FrameworkType = FrameworkType.PROPORTIONAL_DISTRIBUTION


@dataclass
class Participation(BaseEntity):
    total_voters: int
    total_credits_allocated: int
    voting_start: datetime | None
    voting_end: datetime | None
    is_final: bool


@dataclass
class EventResults(BaseEntity):
    event_id: str
    framework_type: FrameworkType
    results: BinaryResults | ProportionalResults
    participation: Participation
    calculated_at: datetime
