"""Controller facade over :class:`~pypilots.service.PilotFilterService`."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable

from pypilots.config import PilotsConfig
from pypilots.models.category import PilotCategory
from pypilots.models.pilot import Pilot
from pypilots.service import PilotFilterService

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(eq=False)
class PilotControllerListener:
    """Pair of optional controller hooks.

    Either hook may be left unset, in which case that event is ignored.
    Listeners compare by identity, so two listeners built from the same
    callables are still registered and removed independently.
    """

    on_filter_changed: Callable[[PilotCategory, list[Pilot]], None] | None = None
    on_data_changed: Callable[[], None] | None = None

    def filter_changed(self, category: PilotCategory, pilots: list[Pilot]) -> None:
        if self.on_filter_changed is not None:
            self.on_filter_changed(category, pilots)

    def data_changed(self) -> None:
        if self.on_data_changed is not None:
            self.on_data_changed()


class PilotController:
    """Tracks the active category and re-broadcasts filter events.

    The controller registers itself on the service's notification channel
    at construction, so ``active_category`` follows every notifying
    filter call made on the service, including calls made directly on
    :attr:`filter_service`.
    """

    def __init__(
        self,
        pilots: Iterable[Pilot] | None = None,
        *,
        service: PilotFilterService | None = None,
        config: PilotsConfig | None = None,
    ) -> None:
        self._filter_service = service if service is not None else PilotFilterService(config=config)
        self._active_category = PilotCategory.ALL
        self._listeners: list[PilotControllerListener] = []

        self._filter_service.add_filter_listener(self._on_category_changed)
        if pilots is not None:
            self._filter_service.add_pilots(pilots)

    @property
    def filter_service(self) -> PilotFilterService:
        return self._filter_service

    @property
    def active_category(self) -> PilotCategory:
        """Category of the last notifying filter call."""
        return self._active_category

    def get_active_category(self) -> PilotCategory:
        return self._active_category

    def show_all(self) -> list[Pilot]:
        return self._filter_service.filter_all()

    def show_legends(self) -> list[Pilot]:
        return self._filter_service.filter_legends()

    def show_current(self) -> list[Pilot]:
        return self._filter_service.filter_current()

    def show_by_category(self, category: PilotCategory) -> list[Pilot]:
        return self._filter_service.filter_by_category(category)

    def get_all_pilots(self) -> list[Pilot]:
        return self._filter_service.get_all_pilots()

    def add_pilot(self, pilot: Pilot) -> None:
        self._filter_service.add_pilot(pilot)
        self._notify_data_changed()

    def add_pilots(self, pilots: Iterable[Pilot]) -> None:
        self._filter_service.add_pilots(pilots)
        self._notify_data_changed()

    def add_listener(self, listener: PilotControllerListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: PilotControllerListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _on_category_changed(self, category: PilotCategory, pilots: list[Pilot]) -> None:
        if category is not self._active_category:
            _logger.debug("Active category %s -> %s", self._active_category.code, category.code)
        self._active_category = category
        for listener in list(self._listeners):
            listener.filter_changed(category, pilots)

    def _notify_data_changed(self) -> None:
        for listener in list(self._listeners):
            listener.data_changed()
