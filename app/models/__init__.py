"""Models package - DDL and entities for all domains."""

from app.models.common import CACHE_DDL, BaseEntity
from app.models.event import (
    EVENT_DDL,
    INVITE_DDL,
    OPTION_DDL,
    OPTION_INDEXES,
    PROPOSAL_DDL,
    Event,
    InviteStats,
    Option,
    OptionId,
    OptionSource,
    ProposalStats,
)
from app.models.voting import (
    VOTE_DDL,
    VOTE_INDEXES,
    EventAnalytics,
    IntegrityAnomaly,
    OptionAggregate,
    VoteRecord,
)

ALL_DDL = [
    # Event
    EVENT_DDL,
    OPTION_DDL,
    INVITE_DDL,
    PROPOSAL_DDL,
    # Voting
    VOTE_DDL,
    # Common
    CACHE_DDL,
    # Indexes
    *OPTION_INDEXES,
    *VOTE_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    # Event
    "EVENT_DDL",
    "OPTION_DDL",
    "INVITE_DDL",
    "PROPOSAL_DDL",
    "Event",
    "Option",
    "OptionId",
    "OptionSource",
    "ProposalStats",
    "InviteStats",
    # Voting
    "VOTE_DDL",
    "VoteRecord",
    "OptionAggregate",
    "IntegrityAnomaly",
    "EventAnalytics",
    # All DDL
    "ALL_DDL",
]
