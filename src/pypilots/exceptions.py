"""Custom exception hierarchy for pypilots."""

from __future__ import annotations


class PilotsError(Exception):
    """Base exception for all pypilots errors."""


class PilotsConfigError(PilotsError):
    """Invalid or missing configuration."""


class UnknownCategoryError(PilotsConfigError):
    """A category code was looked up strictly and matched no category.

    Only raised on the strict lookup paths; the default lookups fall
    back to ``PilotCategory.ALL``.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unknown pilot category code: {code!r}")


class PilotFieldMissingError(PilotsError):
    """A filter needed a field the pilot record does not have."""

    def __init__(
        self,
        field: str,
        *,
        pilot_name: str = "",
    ) -> None:
        self.field = field
        self.pilot_name = pilot_name
        super().__init__(f"Pilot {pilot_name!r} has no {field!r}")
