"""Application settings with environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Display
    use_unicode: bool = False
    gui: bool = False

    # Viewer font
    font_family: str = "Monospace"
    font_point_size: int = 18

    # Diagnostics
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``FENBOARD_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        if "FENBOARD_UNICODE" in env:
            settings = replace(
                settings, use_unicode=_parse_bool("FENBOARD_UNICODE", env["FENBOARD_UNICODE"])
            )
        if "FENBOARD_LOG_LEVEL" in env:
            settings = replace(
                settings,
                log_level=parse_log_level("FENBOARD_LOG_LEVEL", env["FENBOARD_LOG_LEVEL"]),
            )
        if "FENBOARD_FONT_SIZE" in env:
            raw = env["FENBOARD_FONT_SIZE"]
            if not raw.isdigit() or int(raw) < 1:
                raise ValueError(f"FENBOARD_FONT_SIZE must be a positive integer: {raw!r}")
            settings = replace(settings, font_point_size=int(raw))
        return settings


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag: {raw!r}")


def parse_log_level(name: str, raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(_LOG_LEVELS)}: {raw!r}")
    return level
