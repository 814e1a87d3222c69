#!/usr/bin/env python3
"""
Load event dumps into the database and precompute analytics.

Usage:
    python load_data.py dump.json                 # Load one event dump
    python load_data.py a.json b.json             # Load several dumps
    python load_data.py dump.json --precompute    # Load and cache analytics
    python load_data.py --validate                # Check data integrity of all events
    python load_data.py --validate EVENT_ID ...   # Check specific events
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb  # noqa: E402

import settings  # noqa: E402
from app.repositories import CacheRepository, EventRepository, VoteRepository, get_write_connection  # noqa: E402
from app.services.analytics import EventAnalyticsService  # noqa: E402
from etl import load_event_dump, validate_event  # noqa: E402
from settings.logging import setup_logging  # noqa: E402

logger = setup_logging(to_file=True)


def run_validation(event_ids: list[str] | None = None) -> bool:
    """Validate events in database."""
    conn = duckdb.connect(settings.DB_PATH, read_only=True)

    if not event_ids:
        event_ids = [r[0] for r in conn.execute("SELECT id FROM events ORDER BY created_at, id").fetchall()]

    if not event_ids:
        print("\nNo events found. Run 'python load_data.py dump.json' first.\n")
        conn.close()
        return True

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)

    all_valid = True
    for event_id in event_ids:
        result = validate_event(conn, event_id)
        status = "OK" if result["valid"] else "ISSUES"
        print(f"\nEvent {event_id} [{status}]")
        for key, value in result["stats"].items():
            print(f"  {key}: {value:,}")
        for issue in result["issues"]:
            print(f"  - {issue}")
        all_valid = all_valid and result["valid"]

    print()
    conn.close()
    return all_valid


def run_precompute(event_ids: list[str]) -> None:
    """Compute and cache analytics for loaded events."""
    conn = get_write_connection()
    service = EventAnalyticsService(
        event_repo=EventRepository(conn=conn),
        vote_repo=VoteRepository(conn=conn),
        cache_repo=CacheRepository(read_only=False, conn=conn),
    )
    for event_id in event_ids:
        service.precompute(event_id)
    conn.close()


def main(argv: list[str]) -> int:
    args = [a for a in argv if not a.startswith("--")]
    flags = {a for a in argv if a.startswith("--")}

    if "--validate" in flags:
        return 0 if run_validation(args) else 1

    if not args:
        print(__doc__)
        return 1

    conn = get_write_connection()
    loaded = []
    for path in args:
        try:
            loaded.append(load_event_dump(conn, path))
        except (OSError, ValueError, KeyError, duckdb.Error) as e:
            logger.error("Failed to load {}: {}", path, e)
    conn.close()

    if "--precompute" in flags and loaded:
        run_precompute(loaded)

    logger.info("Loaded {} of {} dumps", len(loaded), len(args))
    return 0 if len(loaded) == len(args) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
