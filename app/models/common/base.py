"""Base entity class for all domain entities."""

from dataclasses import asdict
from typing import Any, Self

from pydantic import TypeAdapter


class BaseEntity:
    """Mixin for dataclass entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    def to_json_dict(self) -> dict[str, Any]:
        """Convert entity to JSON-safe dictionary (datetimes as ISO strings)."""
        return TypeAdapter(type(self)).dump_python(self, mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Rebuild entity (and nested entities) from a dictionary."""
        return TypeAdapter(cls).validate_python(data)
