"""Runtime configuration for pypilots."""

from __future__ import annotations

import dataclasses
import os
from typing import Any


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class PilotsConfig:
    """Filter service configuration.

    Parameters
    ----------
    rookie_filtering : bool
        When enabled, ``filter_by_category(PilotCategory.ROOKIE)``
        returns only rookies (and notifies ``ROOKIE``).  Disabled by
        default, in which case ROOKIE falls back to the full list.
    strict_categories : bool
        When enabled, string-keyed category lookups raise
        :class:`~pypilots.exceptions.UnknownCategoryError` for codes
        that match no category instead of falling back to ``ALL``.
    """

    rookie_filtering: bool = False
    strict_categories: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> PilotsConfig:
        """Create configuration from environment variables.

        Reads ``PILOTS_ROOKIE_FILTERING`` and ``PILOTS_STRICT_CATEGORIES``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        PilotsConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_FLAG_MAP = {
            "PILOTS_ROOKIE_FILTERING": "rookie_filtering",
            "PILOTS_STRICT_CATEGORIES": "strict_categories",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_FLAG_MAP.items():
            if field_name in overrides:
                continue
            default = getattr(cls, field_name)
            config_kwargs[field_name] = _env_bool(env.get(env_key), default)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
