"""Invite and proposal models."""

INVITE_DDL = """
CREATE TABLE IF NOT EXISTS invites (
    code VARCHAR PRIMARY KEY,
    event_id VARCHAR NOT NULL,
    email VARCHAR,
    opened_at TIMESTAMP,
    used_at TIMESTAMP
)
"""

PROPOSAL_DDL = """
CREATE TABLE IF NOT EXISTS proposals (
    id VARCHAR PRIMARY KEY,
    event_id VARCHAR NOT NULL,
    title VARCHAR,
    status VARCHAR
)
"""
