"""Vote repository - the vote record store."""

import json

from loguru import logger

from app.models.event import OptionId
from app.models.voting import VoteRecord
from app.repositories.base import BaseRepository, load_json, to_db_timestamp, to_utc
from helpers import formulas


class VoteRepository(BaseRepository):
    """Repository for vote record access."""

    def list_votes_for_event(self, event_id: str) -> list[VoteRecord]:
        """Get all vote records of an event in submission order."""
        rows = self.fetchall(
            """
            SELECT id, event_id, invite_code, allocations, total_credits_used, submitted_at, ip_address
            FROM votes
            WHERE event_id = ?
            ORDER BY submitted_at NULLS LAST, id
            """,
            [event_id],
        )
        result = [
            VoteRecord(
                id=r[0],
                event_id=r[1],
                invite_code=r[2],
                allocations={OptionId(k): v for k, v in (load_json(r[3]) or {}).items()},
                total_credits_used=int(r[4]),
                submitted_at=to_utc(r[5]),
                ip_address=r[6],
            )
            for r in rows
        ]
        logger.debug("list_votes_for_event({}): {} votes", event_id, len(result))
        return result

    def save_vote(self, record: VoteRecord) -> None:
        """Insert a vote or update the existing one for (event_id, invite_code).

        ``total_credits_used`` is recomputed from the allocations.
        """
        self._check_writable()
        self.execute(
            """
            INSERT INTO votes (id, event_id, invite_code, allocations, total_credits_used, submitted_at, ip_address)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT (event_id, invite_code) DO UPDATE SET
                allocations = excluded.allocations,
                total_credits_used = excluded.total_credits_used,
                submitted_at = excluded.submitted_at
            """,
            [
                record.id,
                record.event_id,
                record.invite_code,
                json.dumps(record.allocations),
                formulas.total_credits(record.allocations),
                to_db_timestamp(record.submitted_at),
                record.ip_address,
            ],
        )
        logger.debug("Vote saved: event={}, invite={}", record.event_id, record.invite_code)
