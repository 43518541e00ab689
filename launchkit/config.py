"""Environment-backed launcher settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv

from launchkit.constants import DEFAULT_DIRECTORY_MODE

# Load environment variables from .env file; real environment values win.
load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class LauncherSettings:
    """Settings read from ``LAUNCHKIT_*`` environment variables."""

    output_base: str | None
    directory_mode: int
    log_level: int
    delegate: str | None
    delegated: bool


def _parse_mode(value: str | None) -> int:
    if not value:
        return DEFAULT_DIRECTORY_MODE
    try:
        return int(value, 8)
    except ValueError:
        raise ValueError(f"LAUNCHKIT_DIR_MODE must be an octal mode, got {value!r}") from None


def _parse_level(value: str | None) -> int:
    level = logging.getLevelName((value or DEFAULT_LOG_LEVEL).upper())
    if not isinstance(level, int):
        raise ValueError(f"LAUNCHKIT_LOG_LEVEL must be a logging level name, got {value!r}")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> LauncherSettings:
    """
    Build launcher settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ValueError: If a mode or log level value cannot be parsed.
    """
    env = os.environ if environ is None else environ
    return LauncherSettings(
        output_base=env.get("LAUNCHKIT_OUTPUT_BASE") or None,
        directory_mode=_parse_mode(env.get("LAUNCHKIT_DIR_MODE")),
        log_level=_parse_level(env.get("LAUNCHKIT_LOG_LEVEL")),
        delegate=env.get("LAUNCHKIT_DELEGATE") or None,
        delegated=bool(env.get("LAUNCHKIT_DELEGATED")),
    )
