"""Base model shared by pypilots records.

Records are plain mutable values: attribute assignment is the setter,
and ``validate_assignment`` keeps every write type-checked the same way
construction is.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PilotsBaseModel(BaseModel):
    """Base for pypilots data models."""

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
    )
