"""
config.py

Responsibility: Read process-level settings from the environment.

CLI flags layer on top of these (e.g. `--verbose` overrides the log level).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from start_kit.errors import ConfigError

ENV_CATALOG = "START_KIT_CATALOG"
ENV_LOG_LEVEL = "START_KIT_LOG_LEVEL"
ENV_COMMAND_TIMEOUT = "START_KIT_COMMAND_TIMEOUT"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Settings for one invocation of the CLI."""

    catalog_path: Path | None = None
    log_level: str = "WARNING"
    # None means external commands may run for as long as they need.
    command_timeout: float | None = None

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        catalog_raw = env.get(ENV_CATALOG, "").strip()
        catalog_path = Path(catalog_raw).expanduser() if catalog_raw else None

        log_level = env.get(ENV_LOG_LEVEL, "").strip().upper() or "WARNING"
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"{ENV_LOG_LEVEL} must be one of {', '.join(_LOG_LEVELS)} (got {log_level!r})")

        return cls(
            catalog_path=catalog_path,
            log_level=log_level,
            command_timeout=_parse_timeout(env.get(ENV_COMMAND_TIMEOUT, "")),
        )


def _parse_timeout(raw: str) -> float | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_COMMAND_TIMEOUT} must be a number of seconds (got {raw!r})") from e
    if value <= 0:
        raise ConfigError(f"{ENV_COMMAND_TIMEOUT} must be positive (got {raw!r})")
    return value
