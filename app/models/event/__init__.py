"""Event domain models - events, options, invites and proposals."""

from app.models.event.entities import (
    Event,
    InviteStats,
    Option,
    OptionId,
    OptionSource,
    ProposalStats,
)
from app.models.event.event import EVENT_DDL
from app.models.event.option import OPTION_DDL, OPTION_INDEXES
from app.models.event.participation import INVITE_DDL, PROPOSAL_DDL

__all__ = [
    "EVENT_DDL",
    "OPTION_DDL",
    "OPTION_INDEXES",
    "INVITE_DDL",
    "PROPOSAL_DDL",
    "Event",
    "Option",
    "OptionId",
    "OptionSource",
    "ProposalStats",
    "InviteStats",
]
