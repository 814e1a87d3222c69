"""Cache repository - analytics cache storage."""

import json
from datetime import datetime, timezone

from loguru import logger

from app.repositories.base import BaseRepository, load_json


class CacheRepository(BaseRepository):
    """Repository for analytics cache operations."""

    def get(self, event_id: str, key: str) -> dict | None:
        """Load cached analytics from DB."""
        row = self.fetchone(
            "SELECT data FROM analytics_cache WHERE event_id = ? AND key = ?",
            [event_id, key],
        )
        if row:
            logger.debug("Cache hit: event={}, key={}", event_id, key)
            return load_json(row[0])
        return None

    def set(self, event_id: str, key: str, data: dict) -> None:
        """Save analytics to cache."""
        self._check_writable()

        json_data = json.dumps(data)
        self.execute(
            """
            INSERT OR REPLACE INTO analytics_cache (event_id, key, data, computed_at)
            VALUES (?, ?, ?, ?)
            """,
            [event_id, key, json_data, datetime.now(timezone.utc).replace(tzinfo=None)],
        )
        logger.debug("Cache saved: event={}, key={}", event_id, key)

    def clear(self, event_id: str | None = None) -> None:
        """Clear cache for an event or all."""
        self._check_writable()

        if event_id:
            self.execute("DELETE FROM analytics_cache WHERE event_id = ?", [event_id])
            logger.info("Cache cleared for event {}", event_id)
        else:
            self.execute("DELETE FROM analytics_cache")
            logger.info("All cache cleared")
