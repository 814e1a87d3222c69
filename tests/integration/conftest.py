"""Fixtures backed by an in-memory database."""

import json

import pytest

from app.repositories import CacheRepository, EventRepository, VoteRepository
from app.repositories.base import to_db_timestamp


def insert_event(conn, event):
    conn.execute(
        "INSERT INTO events (id, title, start_time, end_time, created_at, decision_framework) VALUES (?, ?, ?, ?, ?, ?)",
        [
            event.id,
            event.title,
            to_db_timestamp(event.start_time),
            to_db_timestamp(event.end_time),
            to_db_timestamp(event.created_at),
            json.dumps(event.decision_framework),
        ],
    )


def insert_option(conn, option):
    conn.execute(
        "INSERT INTO options (id, event_id, title, position, source) VALUES (?, ?, ?, ?, ?)",
        [option.id, option.event_id, option.title, option.position, option.source.value],
    )


@pytest.fixture
def add_event(conn):
    return lambda event: insert_event(conn, event)


@pytest.fixture
def add_option(conn):
    return lambda option: insert_option(conn, option)


@pytest.fixture
def repos(conn):
    return (
        EventRepository(conn=conn),
        VoteRepository(read_only=False, conn=conn),
        CacheRepository(read_only=False, conn=conn),
    )


@pytest.fixture
def seeded(conn, repos, event, options, votes):
    """Example event with options, votes, invites and proposals stored."""
    insert_event(conn, event)
    for option in options:
        insert_option(conn, option)
    for vote in votes:
        repos[1].save_vote(vote)

    conn.execute(
        """
        INSERT INTO invites (code, event_id, email, opened_at, used_at) VALUES
            ('inv-1', 'evt-1', 'a@example.org', TIMESTAMP '2024-03-01 09:00:00', TIMESTAMP '2024-03-01 10:05:00'),
            ('inv-2', 'evt-1', NULL, TIMESTAMP '2024-03-01 09:30:00', TIMESTAMP '2024-03-01 10:55:00'),
            ('inv-3', 'evt-1', NULL, TIMESTAMP '2024-03-01 12:00:00', TIMESTAMP '2024-03-01 13:00:00'),
            ('inv-4', 'evt-1', NULL, TIMESTAMP '2024-03-01 12:30:00', NULL),
            ('inv-5', 'evt-1', NULL, NULL, NULL)
        """
    )
    conn.execute(
        """
        INSERT INTO proposals (id, event_id, title, status) VALUES
            ('p-1', 'evt-1', 'Skate park', 'approved'),
            ('p-2', 'evt-1', 'Dog run', 'pending_approval'),
            ('p-3', 'evt-1', 'Parking lot', 'rejected')
        """
    )
    return conn
