"""Analytics cache table - computed results keyed per event."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS analytics_cache (
    event_id VARCHAR NOT NULL,
    key VARCHAR NOT NULL,
    data JSON NOT NULL,
    computed_at TIMESTAMP NOT NULL,
    PRIMARY KEY (event_id, key)
)
"""
