"""Analytics API response schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from app.models.voting import AnomalyKind, CreditValue, NodeType


class Schema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class EventItem(Schema):
    """Event identity echo."""

    id: str
    title: str
    start_time: datetime | None
    end_time: datetime | None
    created_at: datetime | None


class VotingStatsItem(Schema):
    total_votes: int
    unique_voters: int
    avg_credits_used: float
    max_credits_used: int
    min_credits_used: int


class ProposalStatsItem(Schema):
    total: int
    approved: int
    pending: int
    rejected: int


class InviteStatsItem(Schema):
    total: int
    used: int
    opened: int


class OptionPerformanceItem(Schema):
    """Per-option totals and quadratic score."""

    option_id: str
    title: str
    total_credits: int
    vote_count: int
    quadratic_score: float


class NodeItem(Schema):
    id: str
    type: NodeType
    label: str
    x: float
    y: float
    total_credits: int | None = None
    vote_count: int | None = None
    credits: int | None = None
    submitted_at: datetime | None = None


class EdgeItem(Schema):
    id: str
    source: str
    target: str
    weight: int
    submitted_at: datetime | None = None


class NetworkGraphItem(Schema):
    nodes: list[NodeItem]
    edges: list[EdgeItem]


class ClusterItem(Schema):
    id: str
    pattern: str
    voter_count: int
    total_credits: int
    avg_credits: float
    percentage: float
    voters: list[str]


class ClusterSummaryItem(Schema):
    total_clusters: int
    largest_cluster: int
    diversity: float


class ClusterAnalysisItem(Schema):
    clusters: list[ClusterItem]
    summary: ClusterSummaryItem


class TimelineItem(Schema):
    bucket_start: datetime
    vote_count: int
    total_credits: int


class IndividualVoteItem(Schema):
    """Vote record as stored, with the IP replaced by its hash."""

    id: str
    voter_id: str
    allocations: dict[str, CreditValue]
    total_credits: int
    submitted_at: datetime | None
    ip_hash: str | None


class AnomalyItem(Schema):
    vote_id: str
    invite_code: str
    kind: AnomalyKind
    option_id: str | None
    detail: str


class AnalyticsResponse(Schema):
    """Event analytics response."""

    event: EventItem
    voting: VotingStatsItem
    proposals: ProposalStatsItem
    invites: InviteStatsItem
    option_performance: list[OptionPerformanceItem]
    network_graph: NetworkGraphItem
    cluster_analysis: ClusterAnalysisItem
    participation_over_time: list[TimelineItem]
    individual_votes: list[IndividualVoteItem]
    anomalies: list[AnomalyItem]


class ReportResponse(BaseModel):
    """CSV report response."""

    event_id: str
    filename: str
    content: str


class EventsResponse(BaseModel):
    """Available events response."""

    items: list[EventItem]
