"""Event (vote) model."""

EVENT_DDL = """
CREATE TABLE IF NOT EXISTS events (
    id VARCHAR PRIMARY KEY,
    title VARCHAR NOT NULL,
    start_time TIMESTAMP,
    end_time TIMESTAMP,
    created_at TIMESTAMP,
    decision_framework JSON
)
"""
