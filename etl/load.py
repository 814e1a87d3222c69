"""Load event dumps (JSON) into the database."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import duckdb
import polars as pl
from loguru import logger

from app.repositories import CacheRepository
from helpers import formulas

EVENT_SCHEMA = {
    "id": pl.Utf8,
    "title": pl.Utf8,
    "start_time": pl.Datetime,
    "end_time": pl.Datetime,
    "created_at": pl.Datetime,
    "decision_framework": pl.Utf8,
}

OPTION_SCHEMA = {
    "id": pl.Utf8,
    "event_id": pl.Utf8,
    "title": pl.Utf8,
    "position": pl.Int64,
    "source": pl.Utf8,
}

VOTE_SCHEMA = {
    "id": pl.Utf8,
    "event_id": pl.Utf8,
    "invite_code": pl.Utf8,
    "allocations": pl.Utf8,
    "total_credits_used": pl.Int64,
    "submitted_at": pl.Datetime,
    "ip_address": pl.Utf8,
}

INVITE_SCHEMA = {
    "code": pl.Utf8,
    "event_id": pl.Utf8,
    "email": pl.Utf8,
    "opened_at": pl.Datetime,
    "used_at": pl.Datetime,
}

PROPOSAL_SCHEMA = {
    "id": pl.Utf8,
    "event_id": pl.Utf8,
    "title": pl.Utf8,
    "status": pl.Utf8,
}


def parse_timestamp(value: str | None) -> datetime | None:
    """ISO-8601 string to naive UTC datetime (naive input is taken as UTC)."""
    if not value:
        return None
    moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def _insert(conn: duckdb.DuckDBPyConnection, table: str, rows: list[dict], schema: dict) -> int:
    if not rows:
        return 0
    df = pl.DataFrame(rows, schema=schema)
    name = f"{table}_df"
    conn.register(name, df)
    try:
        conn.execute(f"INSERT INTO {table} ({', '.join(schema)}) SELECT * FROM {name}")
    finally:
        conn.unregister(name)
    return len(rows)


def _rows(dump: dict[str, Any]) -> dict[str, list[dict]]:
    """Table rows for one dump. Raises KeyError on missing required fields."""
    event = dump["event"]
    event_id = event["id"]
    return {
        "events": [
            {
                "id": event_id,
                "title": event["title"],
                "start_time": parse_timestamp(event.get("start_time")),
                "end_time": parse_timestamp(event.get("end_time")),
                "created_at": parse_timestamp(event.get("created_at")),
                "decision_framework": json.dumps(event.get("decision_framework") or {}),
            }
        ],
        "options": [
            {
                "id": o["id"],
                "event_id": event_id,
                "title": o["title"],
                "position": o.get("position", i),
                "source": o.get("source", "admin"),
            }
            for i, o in enumerate(dump.get("options", []))
        ],
        "votes": [
            {
                "id": v["id"],
                "event_id": event_id,
                "invite_code": v["invite_code"],
                "allocations": json.dumps(v.get("allocations") or {}),
                "total_credits_used": v.get("total_credits_used", formulas.total_credits(v.get("allocations") or {})),
                "submitted_at": parse_timestamp(v.get("submitted_at")),
                "ip_address": v.get("ip_address"),
            }
            for v in dump.get("votes", [])
        ],
        "invites": [
            {
                "code": i["code"],
                "event_id": event_id,
                "email": i.get("email"),
                "opened_at": parse_timestamp(i.get("opened_at")),
                "used_at": parse_timestamp(i.get("used_at")),
            }
            for i in dump.get("invites", [])
        ],
        "proposals": [
            {
                "id": p["id"],
                "event_id": event_id,
                "title": p.get("title"),
                "status": p.get("status"),
            }
            for p in dump.get("proposals", [])
        ],
    }


SCHEMAS = {
    "events": EVENT_SCHEMA,
    "options": OPTION_SCHEMA,
    "votes": VOTE_SCHEMA,
    "invites": INVITE_SCHEMA,
    "proposals": PROPOSAL_SCHEMA,
}


def load_event(conn: duckdb.DuckDBPyConnection, dump: dict[str, Any]) -> dict[str, int]:
    """Replace one event and its options, votes, invites and proposals.

    ``total_credits_used`` is taken from the dump when present so integrity
    problems stay visible; otherwise it is computed from the allocations.
    The replace runs in one transaction: a failed load keeps the previous rows.
    """
    rows = _rows(dump)
    event_id = dump["event"]["id"]

    conn.execute("BEGIN TRANSACTION")
    try:
        for table in ("votes", "options", "invites", "proposals"):
            conn.execute(f"DELETE FROM {table} WHERE event_id = ?", [event_id])
        CacheRepository(read_only=False, conn=conn).clear(event_id)
        conn.execute("DELETE FROM events WHERE id = ?", [event_id])
        counts = {table: _insert(conn, table, rows[table], schema) for table, schema in SCHEMAS.items()}
        conn.execute("COMMIT")
    except Exception:
        conn.execute("ROLLBACK")
        raise

    logger.info(
        "Event {}: {} options, {} votes, {} invites, {} proposals",
        event_id,
        counts["options"],
        counts["votes"],
        counts["invites"],
        counts["proposals"],
    )
    return counts


def load_event_dump(conn: duckdb.DuckDBPyConnection, path: str | Path) -> str:
    """Load a JSON dump file. Returns the event id."""
    dump = json.loads(Path(path).read_text(encoding="utf-8"))
    load_event(conn, dump)
    return dump["event"]["id"]
