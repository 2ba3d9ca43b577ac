"""Composable pilot filters.

A :class:`PilotFilter` wraps a single-argument boolean function over a
:class:`~pypilots.models.pilot.Pilot`.  Filters are immutable values:
combining two filters builds a new one that closes over both operands,
and the operands stay valid and reusable.
"""

from __future__ import annotations

from collections.abc import Callable

from pypilots.exceptions import PilotFieldMissingError
from pypilots.models.category import PilotCategory
from pypilots.models.pilot import Pilot

PilotPredicate = Callable[[Pilot], bool]


class PilotFilter:
    """A boolean test over a pilot record."""

    __slots__ = ("_predicate", "_description")

    def __init__(self, predicate: PilotPredicate, description: str = "") -> None:
        self._predicate = predicate
        self._description = description or getattr(predicate, "__name__", "filter")

    @property
    def description(self) -> str:
        return self._description

    def test(self, pilot: Pilot) -> bool:
        return bool(self._predicate(pilot))

    def __call__(self, pilot: Pilot) -> bool:
        return self.test(pilot)

    def __repr__(self) -> str:
        return f"PilotFilter({self._description})"

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def and_(self, other: PilotFilter) -> PilotFilter:
        """Both filters must accept; *other* is skipped when this one rejects."""
        return PilotFilter(
            lambda pilot: self.test(pilot) and other.test(pilot),
            f"({self._description} and {other.description})",
        )

    def or_(self, other: PilotFilter) -> PilotFilter:
        """Either filter may accept; *other* is skipped when this one accepts."""
        return PilotFilter(
            lambda pilot: self.test(pilot) or other.test(pilot),
            f"({self._description} or {other.description})",
        )

    def negate(self) -> PilotFilter:
        return PilotFilter(lambda pilot: not self.test(pilot), f"not {self._description}")

    def __and__(self, other: PilotFilter) -> PilotFilter:
        return self.and_(other)

    def __or__(self, other: PilotFilter) -> PilotFilter:
        return self.or_(other)

    def __invert__(self) -> PilotFilter:
        return self.negate()

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @staticmethod
    def accept_all() -> PilotFilter:
        return PilotFilter(lambda pilot: True, "all")

    @staticmethod
    def by_category(category: PilotCategory) -> PilotFilter:
        """Match the category code exactly; ``ALL`` matches every record."""
        if category is PilotCategory.ALL:
            return PilotFilter.accept_all()
        code = category.code
        return PilotFilter(lambda pilot: pilot.category == code, f"category={code}")

    @staticmethod
    def by_active_status(active: bool) -> PilotFilter:
        return PilotFilter(lambda pilot: pilot.active == active, f"active={active}")

    @staticmethod
    def by_minimum_championships(min_championships: int) -> PilotFilter:
        return PilotFilter(
            lambda pilot: pilot.championships >= min_championships,
            f"championships>={min_championships}",
        )

    @staticmethod
    def by_team(team: str) -> PilotFilter:
        """Match the team name case-insensitively.

        Raises :class:`PilotFieldMissingError` when applied to a record
        whose ``team`` is ``None``.
        """
        wanted = team.casefold()

        def _matches(pilot: Pilot) -> bool:
            if pilot.team is None:
                raise PilotFieldMissingError("team", pilot_name=pilot.name)
            return pilot.team.casefold() == wanted

        return PilotFilter(_matches, f"team={team}")

    @staticmethod
    def by_name(fragment: str) -> PilotFilter:
        """Case-insensitive substring match on the pilot name."""
        wanted = fragment.casefold()
        return PilotFilter(lambda pilot: wanted in pilot.name.casefold(), f"name~{fragment}")
