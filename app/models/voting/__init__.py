"""Voting domain models - vote records and analytics entities."""

from app.models.voting.entities import (
    AnomalyKind,
    ClusterAnalysis,
    ClusterGroup,
    ClusterSummary,
    CreditValue,
    EventAnalytics,
    IndividualVote,
    IntegrityAnomaly,
    NetworkEdge,
    NetworkGraph,
    NetworkNode,
    NodeType,
    OptionAggregate,
    TimelineBucket,
    VoteRecord,
    VotingStats,
)
from app.models.voting.vote import VOTE_DDL, VOTE_INDEXES

__all__ = [
    "VOTE_DDL",
    "VOTE_INDEXES",
    "VoteRecord",
    "CreditValue",
    "OptionAggregate",
    "VotingStats",
    "AnomalyKind",
    "IntegrityAnomaly",
    "NodeType",
    "NetworkNode",
    "NetworkEdge",
    "NetworkGraph",
    "ClusterGroup",
    "ClusterSummary",
    "ClusterAnalysis",
    "TimelineBucket",
    "IndividualVote",
    "EventAnalytics",
]
