"""ETL package - loading event dumps into the database."""

from etl.load import load_event, load_event_dump
from etl.validation import validate_event

__all__ = [
    "load_event",
    "load_event_dump",
    "validate_event",
]
