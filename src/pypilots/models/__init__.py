"""Data models for pilot records."""

from pypilots.models.category import PilotCategory
from pypilots.models.pilot import Pilot

__all__ = [
    "Pilot",
    "PilotCategory",
]
