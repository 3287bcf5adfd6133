"""Environment-driven settings for observer registries (.env aware)."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RegistrySettings:
    """Logging and metrics knobs; see OBSERVERS_LOG_LEVEL and OBSERVERS_METRICS."""

    log_level: str = DEFAULT_LOG_LEVEL
    metrics_enabled: bool = False


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or "").strip().upper()
    if not level:
        return DEFAULT_LOG_LEVEL
    # getLevelName maps unknown names to "Level X" strings rather than ints
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(env_file: Optional[str] = None) -> RegistrySettings:
    """
    Load a .env file (variables already set in the environment win), then
    read settings from the environment. Invalid values fall back to defaults.
    """
    if env_file is None:
        # search from the working directory, not from this module's location
        env_file = find_dotenv(usecwd=True)
    load_dotenv(env_file, override=False)
    metrics_raw = (os.environ.get("OBSERVERS_METRICS") or "").strip().lower()
    return RegistrySettings(
        log_level=_parse_log_level(os.environ.get("OBSERVERS_LOG_LEVEL")),
        metrics_enabled=metrics_raw in _TRUTHY,
    )
