"""Event domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, NewType

from app.models.common import BaseEntity

OptionId = NewType("OptionId", str)


class OptionSource(str, Enum):
    """Where an option came from."""

    ADMIN = "admin"
    COMMUNITY = "community"


@dataclass(frozen=True)
class Event(BaseEntity):
    """Event identity and decision framework config."""

    id: str
    title: str
    start_time: datetime | None = None
    end_time: datetime | None = None
    created_at: datetime | None = None
    decision_framework: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Option(BaseEntity):
    """A votable option of an event."""

    id: OptionId
    event_id: str
    title: str
    position: int = 0
    source: OptionSource = OptionSource.ADMIN


@dataclass
class ProposalStats(BaseEntity):
    """Community proposal counts per status."""

    total: int = 0
    approved: int = 0
    pending: int = 0
    rejected: int = 0


@dataclass
class InviteStats(BaseEntity):
    """Invite usage counts."""

    total: int = 0
    used: int = 0
    opened: int = 0
