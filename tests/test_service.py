from __future__ import annotations

import pytest

from pypilots.config import PilotsConfig
from pypilots.exceptions import UnknownCategoryError
from pypilots.filters import PilotFilter
from pypilots.models.category import PilotCategory
from pypilots.models.pilot import Pilot
from pypilots.service import PilotFilterService


def _names(pilots: list[Pilot]) -> list[str]:
    return [p.name for p in pilots]


class _Recorder:
    def __init__(self, log: list[tuple[str, PilotCategory, list[str]]], tag: str) -> None:
        self._log = log
        self._tag = tag

    def __call__(self, category: PilotCategory, pilots: list[Pilot]) -> None:
        self._log.append((self._tag, category, _names(pilots)))


# ------------------------------------------------------------------
# Category filters
# ------------------------------------------------------------------


def test_filter_legends_sample(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    assert _names(service.filter_legends()) == ["Ayrton Senna", "Michael Schumacher"]


def test_filter_current_sample(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    assert _names(service.filter_current()) == [
        "Lewis Hamilton",
        "Max Verstappen",
        "Sebastian Vettel",
        "Fernando Alonso",
    ]


def test_filter_by_multiple_criteria_sample_is_empty(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    assert service.filter_by_multiple_criteria(PilotCategory.LEGEND, True, 3) == []


def test_filter_by_multiple_criteria_inactive_legends(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    result = service.filter_by_multiple_criteria(PilotCategory.LEGEND, False, 5)
    assert _names(result) == ["Michael Schumacher"]


def test_filter_all_is_fresh_copy(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    result = service.filter_all()
    assert result == pilots
    result.clear()
    assert len(service.filter_all()) == 7
    assert service.filter_all() is not service.filter_all()


def test_constructor_copies_input(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    pilots.pop()
    assert len(service) == 7


def test_filter_preserves_order_and_source(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    before = service.get_all_pilots()
    result = service.filter(PilotFilter.by_minimum_championships(4))
    assert _names(result) == ["Lewis Hamilton", "Michael Schumacher", "Sebastian Vettel"]
    assert service.get_all_pilots() == before


def test_get_all_pilots_is_copy(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    snapshot = service.get_all_pilots()
    snapshot.append(Pilot(name="Extra"))
    assert len(service.get_all_pilots()) == 7


def test_filter_by_category_dispatch(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    assert _names(service.filter_by_category(PilotCategory.LEGEND)) == ["Ayrton Senna", "Michael Schumacher"]
    assert len(service.filter_by_category(PilotCategory.CURRENT)) == 4
    assert len(service.filter_by_category(PilotCategory.ALL)) == 7


def test_rookie_falls_back_to_all_by_default(pilots: list[Pilot]) -> None:
    log: list[tuple[str, PilotCategory, list[str]]] = []
    service = PilotFilterService(pilots)
    service.add_filter_listener(_Recorder(log, "l"))

    assert len(service.filter_by_category(PilotCategory.ROOKIE)) == 7
    assert log[0][1] is PilotCategory.ALL


def test_rookie_filtering_enabled(pilots: list[Pilot]) -> None:
    log: list[tuple[str, PilotCategory, list[str]]] = []
    service = PilotFilterService(pilots, config=PilotsConfig(rookie_filtering=True))
    service.add_filter_listener(_Recorder(log, "l"))

    assert _names(service.filter_by_category(PilotCategory.ROOKIE)) == ["Oscar Piastri"]
    assert log == [("l", PilotCategory.ROOKIE, ["Oscar Piastri"])]


def test_filter_by_category_code(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    assert len(service.filter_by_category_code("legend")) == 2
    assert len(service.filter_by_category_code("bogus")) == 7


def test_filter_by_category_code_strict(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots, config=PilotsConfig(strict_categories=True))
    assert len(service.filter_by_category_code("current")) == 4
    with pytest.raises(UnknownCategoryError):
        service.filter_by_category_code("bogus")


# ------------------------------------------------------------------
# Data management
# ------------------------------------------------------------------


def test_add_and_clear() -> None:
    service = PilotFilterService()
    service.add_pilot(Pilot(name="A"))
    service.add_pilots([Pilot(name="B"), Pilot(name="A")])
    assert _names(service.get_all_pilots()) == ["A", "B", "A"]

    service.clear_pilots()
    assert service.get_all_pilots() == []
    assert service.filter_all() == []


def test_records_are_shared_by_reference(pilots: list[Pilot]) -> None:
    service = PilotFilterService(pilots)
    pilots[6].category = "current"
    assert len(service.filter_current()) == 5


def test_unknown_category_code_never_matches() -> None:
    service = PilotFilterService([Pilot(name="X", category="mystery")])
    assert service.filter_legends() == []
    assert service.filter_current() == []
    assert len(service.filter_all()) == 1


def test_category_codes_are_not_trimmed() -> None:
    pilot = Pilot(name=" Ayrton Senna ", category=" legend", team="McLaren ")
    service = PilotFilterService([pilot])

    assert service.filter_legends() == []
    assert pilot.name == " Ayrton Senna "
    assert pilot.category == " legend"
    assert pilot.team == "McLaren "


# ------------------------------------------------------------------
# Listeners
# ------------------------------------------------------------------


def test_listeners_called_in_registration_order(pilots: list[Pilot]) -> None:
    log: list[tuple[str, PilotCategory, list[str]]] = []
    service = PilotFilterService(pilots)
    service.add_filter_listener(_Recorder(log, "l1"))
    service.add_filter_listener(_Recorder(log, "l2"))

    result = service.filter_all()

    assert [entry[0] for entry in log] == ["l1", "l2"]
    assert log[0][2] == log[1][2] == _names(result)
    assert all(entry[1] is PilotCategory.ALL for entry in log)


def test_listener_receives_returned_list(pilots: list[Pilot]) -> None:
    received: list[list[Pilot]] = []
    service = PilotFilterService(pilots)
    service.add_filter_listener(lambda category, result: received.append(result))
    result = service.filter_legends()
    assert received == [result]


def test_silent_operations_do_not_notify(pilots: list[Pilot]) -> None:
    log: list[tuple[str, PilotCategory, list[str]]] = []
    service = PilotFilterService()
    service.add_filter_listener(_Recorder(log, "l"))

    service.add_pilots(pilots)
    service.add_pilot(Pilot(name="Z"))
    service.filter(PilotFilter.accept_all())
    service.filter_by_multiple_criteria(PilotCategory.ALL, True, 0)
    service.get_all_pilots()
    service.clear_pilots()

    assert log == []


def test_remove_unregistered_listener_is_noop(pilots: list[Pilot]) -> None:
    log: list[tuple[str, PilotCategory, list[str]]] = []
    service = PilotFilterService(pilots)
    kept = _Recorder(log, "kept")
    service.add_filter_listener(kept)

    service.remove_filter_listener(_Recorder(log, "stranger"))
    service.filter_current()

    assert [entry[0] for entry in log] == ["kept"]


def test_remove_listener_stops_notifications(pilots: list[Pilot]) -> None:
    log: list[tuple[str, PilotCategory, list[str]]] = []
    service = PilotFilterService(pilots)
    first = _Recorder(log, "first")
    second = _Recorder(log, "second")
    service.add_filter_listener(first)
    service.add_filter_listener(second)

    service.remove_filter_listener(first)
    service.filter_all()

    assert [entry[0] for entry in log] == ["second"]


def test_listener_error_propagates_and_skips_rest(pilots: list[Pilot]) -> None:
    log: list[tuple[str, PilotCategory, list[str]]] = []
    service = PilotFilterService(pilots)

    def _boom(category: PilotCategory, result: list[Pilot]) -> None:
        raise RuntimeError("listener failed")

    service.add_filter_listener(_boom)
    service.add_filter_listener(_Recorder(log, "after"))

    with pytest.raises(RuntimeError, match="listener failed"):
        service.filter_all()
    assert log == []
