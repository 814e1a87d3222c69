"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository
from app.repositories.db import get_db, get_write_connection, init_tables
from app.repositories.event import EventRepository
from app.repositories.voting import VoteRepository

__all__ = [
    # DB
    "get_db",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    # Event
    "EventRepository",
    # Voting
    "VoteRepository",
]
