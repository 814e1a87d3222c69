"""Results API response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.models.results import ThresholdMode


class Schema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class RankedOptionItem(Schema):
    option_id: str
    title: str
    votes: float
    rank: int
    selected: bool


class BinaryResultsItem(Schema):
    framework_type: Literal["binary_selection"]
    threshold_mode: ThresholdMode
    selected_options: list[RankedOptionItem]
    not_selected_options: list[RankedOptionItem]
    selected_count: int
    selection_margin: float | None


class DistributionItem(Schema):
    option_id: str
    title: str
    votes: float
    allocation_amount: float
    allocation_percentage: float


class ProportionalResultsItem(Schema):
    framework_type: Literal["proportional_distribution"]
    resource_name: str
    resource_symbol: str
    total_pool: float
    distributions: list[DistributionItem]
    total_allocated: float
    gini_coefficient: float


class ParticipationItem(Schema):
    total_voters: int
    total_credits_allocated: int
    voting_start: datetime | None
    voting_end: datetime | None
    is_final: bool


class ResultsResponse(Schema):
    """Event results response."""

    event_id: str
    framework_type: str
    results: BinaryResultsItem | ProportionalResultsItem = Field(discriminator="framework_type")
    participation: ParticipationItem
    calculated_at: datetime


class AllocationPreviewRequest(BaseModel):
    """Draft allocation from the voting page."""

    allocations: dict[str, int]
    max_credits: int


class AllocationPreviewResponse(Schema):
    votes: dict[str, float]
    used: int
    remaining: int
    max_credits: int
    valid: bool
