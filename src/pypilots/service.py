"""In-memory pilot collection with category filtering.

This is the only component that owns pilot records.  Every query returns
a fresh list; callers never see the internal sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pypilots.config import PilotsConfig
from pypilots.filters import PilotFilter
from pypilots.models.category import PilotCategory
from pypilots.models.pilot import Pilot

_logger = logging.getLogger(__name__)

FilterListener = Callable[[PilotCategory, list[Pilot]], None]
"""Callback invoked as ``listener(category, results)`` after a category filter."""


class PilotFilterService:
    """Owns an ordered list of pilots and applies filters to it.

    Only the category methods (:meth:`filter_all`, :meth:`filter_legends`,
    :meth:`filter_current`, :meth:`filter_rookies` and the dispatchers
    built on them) notify listeners.  :meth:`filter` and
    :meth:`filter_by_multiple_criteria` never do.

    Listeners run synchronously in registration order.  An exception
    raised by a listener propagates to the caller of the filter method
    and skips the remaining listeners.
    """

    def __init__(
        self,
        pilots: Iterable[Pilot] | None = None,
        *,
        config: PilotsConfig | None = None,
    ) -> None:
        self._config = config or PilotsConfig()
        self._pilots: list[Pilot] = list(pilots) if pilots is not None else []
        self._listeners: list[FilterListener] = []

    @property
    def config(self) -> PilotsConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._pilots)

    # ------------------------------------------------------------------
    # Category filters (notifying)
    # ------------------------------------------------------------------

    def filter_all(self) -> list[Pilot]:
        result = list(self._pilots)
        self._notify_filtered(PilotCategory.ALL, result)
        return result

    def filter_legends(self) -> list[Pilot]:
        return self._filter_category(PilotCategory.LEGEND)

    def filter_current(self) -> list[Pilot]:
        return self._filter_category(PilotCategory.CURRENT)

    def filter_rookies(self) -> list[Pilot]:
        return self._filter_category(PilotCategory.ROOKIE)

    def filter_by_category(self, category: PilotCategory) -> list[Pilot]:
        """Dispatch to the matching category filter.

        ``ROOKIE`` falls back to :meth:`filter_all` unless
        ``config.rookie_filtering`` is enabled.
        """
        if category is PilotCategory.LEGEND:
            return self.filter_legends()
        if category is PilotCategory.CURRENT:
            return self.filter_current()
        if category is PilotCategory.ROOKIE and self._config.rookie_filtering:
            return self.filter_rookies()
        return self.filter_all()

    def filter_by_category_code(self, code: str) -> list[Pilot]:
        """Resolve *code* to a category and dispatch to :meth:`filter_by_category`.

        With ``config.strict_categories`` an unknown code raises
        :class:`~pypilots.exceptions.UnknownCategoryError`; otherwise it
        is treated as ``ALL``.
        """
        category = PilotCategory.from_code(code, strict=self._config.strict_categories)
        return self.filter_by_category(category)

    # ------------------------------------------------------------------
    # Ad hoc filters (silent)
    # ------------------------------------------------------------------

    def filter(self, pilot_filter: PilotFilter) -> list[Pilot]:
        result = [pilot for pilot in self._pilots if pilot_filter.test(pilot)]
        _logger.debug("Filter %r matched %d of %d pilots", pilot_filter, len(result), len(self._pilots))
        return result

    def filter_by_multiple_criteria(
        self,
        category: PilotCategory,
        active_only: bool,
        min_championships: int,
    ) -> list[Pilot]:
        """Apply category, active-status and championship filters together.

        *active_only* is an equality test: ``False`` selects retired
        pilots only, not "any status".
        """
        combined = (
            PilotFilter.by_category(category)
            .and_(PilotFilter.by_active_status(active_only))
            .and_(PilotFilter.by_minimum_championships(min_championships))
        )
        return self.filter(combined)

    # ------------------------------------------------------------------
    # Data management
    # ------------------------------------------------------------------

    def add_pilot(self, pilot: Pilot) -> None:
        self._pilots.append(pilot)
        _logger.debug("Added pilot %s (%d total)", pilot.name, len(self._pilots))

    def add_pilots(self, pilots: Iterable[Pilot]) -> None:
        before = len(self._pilots)
        self._pilots.extend(pilots)
        _logger.debug("Added %d pilots (%d total)", len(self._pilots) - before, len(self._pilots))

    def get_all_pilots(self) -> list[Pilot]:
        return list(self._pilots)

    def clear_pilots(self) -> None:
        self._pilots.clear()
        _logger.debug("Cleared pilot list")

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_filter_listener(self, listener: FilterListener) -> None:
        self._listeners.append(listener)

    def remove_filter_listener(self, listener: FilterListener) -> None:
        """Unregister *listener*; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            _logger.debug("Listener %r was not registered", listener)

    def _filter_category(self, category: PilotCategory) -> list[Pilot]:
        result = self.filter(PilotFilter.by_category(category))
        self._notify_filtered(category, result)
        return result

    def _notify_filtered(self, category: PilotCategory, results: list[Pilot]) -> None:
        _logger.debug("Notifying %d listeners of %s (%d pilots)", len(self._listeners), category.code, len(results))
        for listener in list(self._listeners):
            listener(category, results)
