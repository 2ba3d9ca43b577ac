"""Pilot record model."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pypilots.models._base import PilotsBaseModel


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Pilot(PilotsBaseModel):
    """One driver.

    Records have no identity beyond value equality and are mutable in
    place.  ``category`` should hold a :class:`PilotCategory` code, but
    any string is accepted; unknown codes never match a category filter.
    """

    name: str = ""
    """Driver name (e.g. ``"Ayrton Senna"``)."""
    category: str = ""
    """Category code (``"legend"``, ``"current"``, ``"rookie"``)."""
    championships: int = Field(default=0, ge=0)
    """World championships won."""
    team: str | None = None
    """Team name.  ``None`` when unknown; team filters raise on such records."""
    active: bool = False
    """Whether the driver is still racing."""

    def __str__(self) -> str:
        return (
            f"Pilot{{name='{_render(self.name)}', category='{_render(self.category)}', "
            f"championships={self.championships}, team='{_render(self.team)}', "
            f"active={_render(self.active)}}}"
        )
