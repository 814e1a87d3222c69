"""Event repository - events, options, invites and proposals."""

from loguru import logger

from app.models.event import Event, InviteStats, Option, OptionId, OptionSource, ProposalStats
from app.repositories.base import BaseRepository, load_json, to_utc


def _to_event(row: tuple) -> Event:
    return Event(
        id=row[0],
        title=row[1],
        start_time=to_utc(row[2]),
        end_time=to_utc(row[3]),
        created_at=to_utc(row[4]),
        decision_framework=load_json(row[5]) or {},
    )


class EventRepository(BaseRepository):
    """Repository for event metadata access."""

    def get_event(self, event_id: str) -> Event | None:
        """Get event by id, None if it does not exist."""
        row = self.fetchone(
            """
            SELECT id, title, start_time, end_time, created_at, decision_framework
            FROM events WHERE id = ?
            """,
            [event_id],
        )
        if row is None:
            logger.debug("get_event({}): not found", event_id)
            return None

        return _to_event(row)

    def list_options_for_event(self, event_id: str) -> list[Option]:
        """Get all options of an event ordered by position."""
        rows = self.fetchall(
            """
            SELECT id, event_id, title, position, source
            FROM options
            WHERE event_id = ?
            ORDER BY position, id
            """,
            [event_id],
        )
        result = [
            Option(
                id=OptionId(r[0]),
                event_id=r[1],
                title=r[2],
                position=r[3] or 0,
                source=OptionSource(r[4] or OptionSource.ADMIN.value),
            )
            for r in rows
        ]
        logger.debug("list_options_for_event({}): {} options", event_id, len(result))
        return result

    def get_proposal_stats(self, event_id: str) -> ProposalStats:
        """Count community proposals by status."""
        row = self.fetchone(
            """
            SELECT COUNT(*),
                   SUM(CASE WHEN status = 'approved' THEN 1 ELSE 0 END),
                   SUM(CASE WHEN status IN ('pending_approval', 'submitted') THEN 1 ELSE 0 END),
                   SUM(CASE WHEN status = 'rejected' THEN 1 ELSE 0 END)
            FROM proposals WHERE event_id = ?
            """,
            [event_id],
        )
        return ProposalStats(
            total=int(row[0] or 0),
            approved=int(row[1] or 0),
            pending=int(row[2] or 0),
            rejected=int(row[3] or 0),
        )

    def get_invite_stats(self, event_id: str) -> InviteStats:
        """Count invites, used and opened."""
        row = self.fetchone(
            """
            SELECT COUNT(*), COUNT(used_at), COUNT(opened_at)
            FROM invites WHERE event_id = ?
            """,
            [event_id],
        )
        return InviteStats(total=int(row[0] or 0), used=int(row[1] or 0), opened=int(row[2] or 0))

    def list_events(self) -> list[Event]:
        """All events, newest first."""
        rows = self.fetchall(
            """
            SELECT id, title, start_time, end_time, created_at, decision_framework
            FROM events ORDER BY created_at DESC NULLS LAST, id
            """
        )
        return [_to_event(r) for r in rows]
