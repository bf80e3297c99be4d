"""
Base models and configuration for the maps proxy.

This module provides the foundation for all data models using Pydantic v2
with JSON serialization that mirrors the upstream wire format.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseProxyModel(BaseModel):
    """
    Base model for all proxy data structures.

    Upstream payloads are treated as loosely typed: unknown fields are
    dropped and every field a subclass declares should have a default.
    """

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Allow extra fields for flexibility with external APIs
        extra="ignore",
        # Validate default values
        validate_default=True,
        # Accept both field names and aliases on input
        populate_by_name=True,
    )

    def model_dump_wire(self) -> dict[str, Any]:
        """
        Serialize model into the dictionary shape used on the wire.

        Absent fields are omitted so that a decoded payload re-encodes
        into the same shape it arrived in.
        """
        return self.model_dump(
            mode="json",
            exclude_none=True,
            by_alias=True,
        )

    def model_dump_wire_json(self) -> str:
        """Serialize model to a JSON string in wire shape."""
        return self.model_dump_json(exclude_none=True, by_alias=True)
