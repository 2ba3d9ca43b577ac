"""Demonstration of the filter controller on a fixed sample grid.

Usage
-----
::

    python -m pypilots
    python -m pypilots --json
    python -m pypilots --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from pypilots.controller import PilotController, PilotControllerListener
from pypilots.models.category import PilotCategory
from pypilots.models.pilot import Pilot

CUSTOM_FILTER_TITLE = "Lendas Ativas com 3+ Campeonatos"


def sample_pilots() -> list[Pilot]:
    """Return the seven sample records used by the demonstration."""
    return [
        Pilot(name="Lewis Hamilton", category="current", championships=7, team="Mercedes", active=True),
        Pilot(name="Max Verstappen", category="current", championships=3, team="Red Bull", active=True),
        Pilot(name="Ayrton Senna", category="legend", championships=3, team="McLaren", active=False),
        Pilot(name="Michael Schumacher", category="legend", championships=7, team="Ferrari", active=False),
        Pilot(name="Sebastian Vettel", category="current", championships=4, team="Aston Martin", active=True),
        Pilot(name="Fernando Alonso", category="current", championships=2, team="Aston Martin", active=True),
        Pilot(name="Oscar Piastri", category="rookie", championships=0, team="McLaren", active=True),
    ]


# ── text report ──────────────────────────────────────────────


def _print_filter(out: TextIO, category: PilotCategory, pilots: list[Pilot]) -> None:
    print(f"\n=== Filtro: {category.display_name} ===", file=out)
    for pilot in pilots:
        print(pilot, file=out)
    print(f"Total: {len(pilots)} pilotos", file=out)


def run_text(out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    controller = PilotController(sample_pilots())
    controller.add_listener(
        PilotControllerListener(on_filter_changed=lambda category, pilots: _print_filter(out, category, pilots))
    )

    print("Demonstração do Sistema de Filtros", file=out)

    controller.show_all()
    controller.show_legends()
    controller.show_current()

    print(f"\n=== Filtro Personalizado: {CUSTOM_FILTER_TITLE} ===", file=out)
    custom = controller.filter_service.filter_by_multiple_criteria(PilotCategory.LEGEND, True, 3)
    for pilot in custom:
        print(pilot, file=out)


# ── JSON report ──────────────────────────────────────────────


def build_report() -> dict[str, Any]:
    """Run the demonstration queries and collect the results as plain data."""
    controller = PilotController(sample_pilots())
    filters: list[dict[str, Any]] = []

    def _collect(category: PilotCategory, pilots: list[Pilot]) -> None:
        filters.append(
            {
                "category": category.code,
                "label": category.display_name,
                "pilots": [pilot.model_dump() for pilot in pilots],
                "total": len(pilots),
            }
        )

    controller.add_listener(PilotControllerListener(on_filter_changed=_collect))
    controller.show_all()
    controller.show_legends()
    controller.show_current()

    custom = controller.filter_service.filter_by_multiple_criteria(PilotCategory.LEGEND, True, 3)
    return {
        "filters": filters,
        "custom": {
            "label": CUSTOM_FILTER_TITLE,
            "pilots": [pilot.model_dump() for pilot in custom],
            "total": len(custom),
        },
        "active_category": controller.active_category.code,
    }


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pilot filter demonstration")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    if args.json_mode:
        print(json.dumps(build_report(), indent=2, ensure_ascii=False))
    else:
        run_text()
    return 0


if __name__ == "__main__":
    sys.exit(main())
