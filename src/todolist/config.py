"""Settings loaded from TODOLIST_* environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from todolist.formatter import FormatType

logger = logging.getLogger(__name__)

ENV_PREFIX = "TODOLIST"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FORMAT = FormatType.TABLE
DEFAULT_PROMPT = "todo> "


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(environ: Mapping[str, str], name: str, default: str) -> str:
    v = environ.get(name)
    return default if v is None or v.strip() == "" else v


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    format: FormatType = DEFAULT_FORMAT
    prompt: str = DEFAULT_PROMPT


def parse_log_level(raw: str, default: str = DEFAULT_LOG_LEVEL) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown log level {raw!r}, using {default}")
        return default
    return level


def parse_format(raw: str, default: FormatType = DEFAULT_FORMAT) -> FormatType:
    try:
        return FormatType(raw.strip().lower())
    except ValueError:
        logger.warning(f"Unknown output format {raw!r}, using {default.value}")
        return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from ``environ`` (defaults to ``os.environ``).

    Invalid values are logged and replaced by their defaults.
    """
    if environ is None:
        environ = os.environ
    return Settings(
        log_level=parse_log_level(_env(environ, _k("LOG_LEVEL"), DEFAULT_LOG_LEVEL)),
        format=parse_format(_env(environ, _k("FORMAT"), DEFAULT_FORMAT.value)),
        prompt=environ.get(_k("PROMPT"), DEFAULT_PROMPT),
    )
