"""Shared fixtures."""

from datetime import datetime, timezone

import duckdb
import pytest

from app.models.event import Event, Option, OptionId
from app.models.voting import VoteRecord
from app.repositories.db import init_tables

EVENT_ID = "evt-1"


@pytest.fixture
def make_vote():
    """Factory for vote records; total defaults to the allocation sum."""
    counter = iter(range(1, 10_000))

    def make(invite_code, allocations, total=None, submitted_at=None, ip_address=None, event_id=EVENT_ID):
        return VoteRecord(
            id=f"vote-{next(counter)}",
            event_id=event_id,
            invite_code=invite_code,
            allocations={OptionId(k): v for k, v in allocations.items()},
            total_credits_used=sum(allocations.values()) if total is None else total,
            submitted_at=submitted_at,
            ip_address=ip_address,
        )

    return make


@pytest.fixture
def event():
    return Event(
        id=EVENT_ID,
        title="Community Budget",
        start_time=datetime(2024, 3, 1, 9, tzinfo=timezone.utc),
        end_time=datetime(2024, 3, 2, 9, tzinfo=timezone.utc),
        created_at=datetime(2024, 2, 28, 12, tzinfo=timezone.utc),
        decision_framework={"framework_type": "binary_selection", "config": {"threshold_mode": "top_n", "top_n_count": 1}},
    )


@pytest.fixture
def options():
    return [
        Option(id=OptionId("A"), event_id=EVENT_ID, title="Park", position=0),
        Option(id=OptionId("B"), event_id=EVENT_ID, title="Library", position=1),
    ]


@pytest.fixture
def votes(make_vote):
    """Three voters: A+B, A+B, B only."""
    return [
        make_vote("inv-1", {"A": 80, "B": 20}, submitted_at=datetime(2024, 3, 1, 10, 5, tzinfo=timezone.utc), ip_address="10.0.0.1"),
        make_vote("inv-2", {"A": 30, "B": 50}, submitted_at=datetime(2024, 3, 1, 10, 55, tzinfo=timezone.utc)),
        make_vote("inv-3", {"B": 20}, submitted_at=datetime(2024, 3, 1, 13, 0, tzinfo=timezone.utc), ip_address="10.0.0.2"),
    ]


@pytest.fixture
def conn():
    """In-memory database with all tables."""
    connection = duckdb.connect(":memory:")
    init_tables(connection)
    yield connection
    connection.close()
