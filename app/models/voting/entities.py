"""Voting domain entities - vote records and computed analytics."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from app.models.common import BaseEntity
from app.models.event import Event, InviteStats, OptionId, ProposalStats
from helpers import formulas

# Allocation values as read from the store; only ints are credits
CreditValue = int | float | str


@dataclass(frozen=True)
class VoteRecord(BaseEntity):
    """One voter's credit allocation for an event.

    ``invite_code`` is the voter identity. ``total_credits_used`` is written
    by the store and is expected to equal the allocation sum. Allocation
    values are kept as stored; non-integer ones are reported, not coerced.
    """

    id: str
    event_id: str
    invite_code: str
    allocations: dict[OptionId, CreditValue]
    total_credits_used: int
    submitted_at: datetime | None = None
    ip_address: str | None = None

    def funded(self) -> dict[OptionId, int]:
        """Allocations with strictly positive integer credits."""
        return {
            option_id: credits
            for option_id, credits in self.allocations.items()
            if formulas.is_credit_amount(credits) and credits > 0
        }


@dataclass
class OptionAggregate(BaseEntity):
    """Per-option totals over all vote records."""

    option_id: OptionId
    title: str
    total_credits: int = 0
    vote_count: int = 0
    quadratic_score: float = 0.0


@dataclass
class VotingStats(BaseEntity):
    """Event-wide participation summary."""

    total_votes: int = 0
    unique_voters: int = 0
    avg_credits_used: float = 0.0
    max_credits_used: int = 0
    min_credits_used: int = 0


class AnomalyKind(str, Enum):
    """Kinds of data-integrity problems found in a vote record."""

    UNKNOWN_OPTION = "unknown_option"
    NEGATIVE_CREDITS = "negative_credits"
    INVALID_CREDITS = "invalid_credits"
    TOTAL_MISMATCH = "total_mismatch"


@dataclass(frozen=True)
class IntegrityAnomaly(BaseEntity):
    """A vote record contribution excluded from option aggregates."""

    vote_id: str
    invite_code: str
    kind: AnomalyKind
    option_id: str | None = None
    detail: str = ""


class NodeType(str, Enum):
    OPTION = "option"
    VOTER = "voter"


@dataclass
class NetworkNode(BaseEntity):
    """Graph node with layout coordinates.

    Option nodes carry ``total_credits`` and ``vote_count`` and use the option
    title as label; voter nodes carry ``credits`` and ``submitted_at``.
    """

    id: str
    type: NodeType
    label: str
    x: float
    y: float
    total_credits: int | None = None
    vote_count: int | None = None
    credits: int | None = None
    submitted_at: datetime | None = None


@dataclass
class NetworkEdge(BaseEntity):
    """Voter -> option edge weighted by allocated credits."""

    id: str
    source: str
    target: str
    weight: int
    submitted_at: datetime | None = None


@dataclass
class NetworkGraph(BaseEntity):
    nodes: list[NetworkNode] = field(default_factory=list)
    edges: list[NetworkEdge] = field(default_factory=list)


@dataclass
class ClusterGroup(BaseEntity):
    """Voters sharing one allocation signature."""

    id: str
    pattern: str
    voter_count: int
    total_credits: int
    avg_credits: float
    percentage: float
    voters: list[str] = field(default_factory=list)


@dataclass
class ClusterSummary(BaseEntity):
    total_clusters: int = 0
    largest_cluster: int = 0
    diversity: float = 0.0


@dataclass
class ClusterAnalysis(BaseEntity):
    clusters: list[ClusterGroup] = field(default_factory=list)
    summary: ClusterSummary = field(default_factory=ClusterSummary)


@dataclass
class TimelineBucket(BaseEntity):
    """Votes submitted within one UTC hour."""

    bucket_start: datetime
    vote_count: int = 0
    total_credits: int = 0


@dataclass
class IndividualVote(BaseEntity):
    """Vote record as listed to operators, with the IP replaced by its hash."""

    id: str
    voter_id: str
    allocations: dict[str, CreditValue]
    total_credits: int
    submitted_at: datetime | None = None
    ip_hash: str | None = None


@dataclass
class EventAnalytics(BaseEntity):
    """Merged analytics for one event snapshot."""

    event: Event
    voting: VotingStats
    option_performance: list[OptionAggregate]
    network_graph: NetworkGraph
    cluster_analysis: ClusterAnalysis
    participation_over_time: list[TimelineBucket]
    individual_votes: list[IndividualVote]
    anomalies: list[IntegrityAnomaly] = field(default_factory=list)
    proposals: ProposalStats = field(default_factory=ProposalStats)
    invites: InviteStats = field(default_factory=InviteStats)
