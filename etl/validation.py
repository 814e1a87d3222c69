"""Data validation functions."""

from collections import Counter

import duckdb

from app.models.voting import AnomalyKind
from app.repositories import EventRepository, VoteRepository
from app.services.analytics.aggregation import find_anomalies

ANOMALY_CHECKS = [
    (AnomalyKind.TOTAL_MISMATCH, "total_mismatches", "{} votes have total_credits_used different from their allocations"),
    (AnomalyKind.UNKNOWN_OPTION, "unknown_option_refs", "{} allocations reference options outside the event"),
    (AnomalyKind.NEGATIVE_CREDITS, "negative_credits", "{} allocations have negative credits"),
    (AnomalyKind.INVALID_CREDITS, "invalid_credits", "{} allocations are not whole numbers of credits"),
]


def validate_event(conn: duckdb.DuckDBPyConnection, event_id: str) -> dict:
    """Validate vote data integrity for an event.

    Vote-level checks are the integrity anomalies the analytics report.
    """
    issues = []
    stats = {}

    event_count = conn.execute("SELECT COUNT(*) FROM events WHERE id = ?", [event_id]).fetchone()[0]
    if event_count == 0:
        issues.append("Event not found")

    options = EventRepository(conn=conn).list_options_for_event(event_id)
    stats["options"] = len(options)
    if not options:
        issues.append("No options defined")

    votes = VoteRepository(conn=conn).list_votes_for_event(event_id)
    stats["votes"] = len(votes)

    counts = Counter(a.kind for a in find_anomalies(options, votes))
    for kind, key, message in ANOMALY_CHECKS:
        stats[key] = counts[kind]
        if counts[kind] > 0:
            issues.append(message.format(counts[kind]))

    no_timestamp = sum(1 for v in votes if v.submitted_at is None)
    stats["votes_without_timestamp"] = no_timestamp
    if no_timestamp > 0:
        issues.append(f"{no_timestamp} votes have no submission time")

    return {
        "event_id": event_id,
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
