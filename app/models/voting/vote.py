"""Vote record model - one row per (event, invite code)."""

VOTE_DDL = """
CREATE TABLE IF NOT EXISTS votes (
    id VARCHAR PRIMARY KEY,
    event_id VARCHAR NOT NULL,
    invite_code VARCHAR NOT NULL,
    allocations JSON NOT NULL,
    total_credits_used INTEGER NOT NULL,
    submitted_at TIMESTAMP,
    ip_address VARCHAR,
    UNIQUE (event_id, invite_code)
)
"""

VOTE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_votes_event ON votes(event_id)",
]
