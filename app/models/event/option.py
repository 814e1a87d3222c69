"""Option model - one row per votable option of an event."""

OPTION_DDL = """
CREATE TABLE IF NOT EXISTS options (
    id VARCHAR PRIMARY KEY,
    event_id VARCHAR NOT NULL,
    title VARCHAR NOT NULL,
    position INTEGER DEFAULT 0,
    source VARCHAR DEFAULT 'admin'
)
"""

OPTION_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_options_event ON options(event_id)",
]
