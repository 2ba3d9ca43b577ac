"""pypilots - In-memory pilot records with category filtering and change notification."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypilots")
except PackageNotFoundError:
    __version__ = "0+local"
from pypilots.config import PilotsConfig
from pypilots.controller import PilotController, PilotControllerListener
from pypilots.exceptions import (
    PilotFieldMissingError,
    PilotsConfigError,
    PilotsError,
    UnknownCategoryError,
)
from pypilots.filters import PilotFilter
from pypilots.models import Pilot, PilotCategory
from pypilots.service import FilterListener, PilotFilterService

__all__ = [
    "__version__",
    "FilterListener",
    "Pilot",
    "PilotCategory",
    "PilotController",
    "PilotControllerListener",
    "PilotFieldMissingError",
    "PilotFilter",
    "PilotFilterService",
    "PilotsConfig",
    "PilotsConfigError",
    "PilotsError",
    "UnknownCategoryError",
]
