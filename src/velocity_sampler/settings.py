"""Sampler settings.

Settings are persisted as a simple JSON file, by default
`velocity_sampler.json` in the current working directory:
- capacity: number of samples kept in the rolling window
- log_level: logging level name used by the command line tools
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from velocity_sampler.tracking.clock import Clock
from velocity_sampler.tracking.sampler import DEFAULT_CAPACITY, RollingVelocitySampler

DEFAULT_SETTINGS = {
    "capacity": DEFAULT_CAPACITY,   # samples in the window
    "log_level": "INFO",
}

SETTINGS_FILENAME = "velocity_sampler.json"

logger = logging.getLogger(__name__)


def settings_path() -> Path:
    """Get the path to the default settings file."""
    return Path.cwd() / SETTINGS_FILENAME


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Load the settings, falling back to defaults for missing keys."""
    path = settings_path() if path is None else Path(path)
    data = DEFAULT_SETTINGS.copy()

    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            data.update(json.load(f))
        logger.info("Loaded sampler settings from %s", path)

    return data


def save_settings(data: dict[str, Any], path: Path | None = None) -> None:
    """Save the settings to the file."""
    path = settings_path() if path is None else Path(path)

    logger.info("Saving sampler settings to %s", path)

    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def build_sampler(settings: dict[str, Any] | None = None,
                  clock: Clock | None = None) -> RollingVelocitySampler:
    """Create a sampler configured from settings."""
    s = DEFAULT_SETTINGS if settings is None else settings
    capacity = int(s.get("capacity", DEFAULT_CAPACITY))
    return RollingVelocitySampler(capacity=capacity, clock=clock)
