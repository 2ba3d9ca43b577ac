"""Pilot category tags."""

from __future__ import annotations

from enum import StrEnum

from pypilots.exceptions import UnknownCategoryError


class PilotCategory(StrEnum):
    """Closed set of pilot classification buckets.

    The member value is the category code stored on
    :attr:`Pilot.category <pypilots.models.pilot.Pilot.category>`.
    Codes without a mapped member resolve to ``ALL`` instead of raising
    ``ValueError``.
    """

    ALL = "all", "Todos"
    LEGEND = "legend", "Lendas"
    CURRENT = "current", "Atuais"
    ROOKIE = "rookie", "Novatos"

    display_name: str

    def __new__(cls, code: str, display_name: str) -> PilotCategory:
        member = str.__new__(cls, code)
        member._value_ = code
        member.display_name = display_name
        return member

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> PilotCategory:
        return cls.ALL

    @classmethod
    def from_code(cls, code: str | None, *, strict: bool = False) -> PilotCategory:
        """Return the category for *code* (exact, case-sensitive match).

        Unrecognized codes return ``ALL`` unless *strict* is set, in
        which case :class:`UnknownCategoryError` is raised.
        """
        for category in cls:
            if category.code == code:
                return category
        if strict:
            raise UnknownCategoryError(str(code))
        return cls.ALL
