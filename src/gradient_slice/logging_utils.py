"""Structured logging helpers for the gradient-slice CLI and library."""

from __future__ import annotations

import json
import logging
import os
from typing import Any

JSON_LOGS_ENV = "GRADIENT_SLICE_JSON_LOGS"
LOG_LEVEL_ENV = "GRADIENT_SLICE_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in {"1", "true", "yes"}


def resolve_level(level: str | None = None) -> int:
    """Map a level name (or the GRADIENT_SLICE_LOG_LEVEL env var) to a logging constant.

    Unknown names fall back to WARNING, the library's quiet default.
    """

    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure root logging for command line use."""

    as_json = _env_flag(JSON_LOGS_ENV) if json_logs is None else json_logs
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s" if as_json else "%(levelname)s:%(name)s:%(message)s",
    )


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    json_logs: bool | None = None,
    **fields: Any,
) -> None:
    """Emit ``{"event": event, **fields}`` at ``level``, as JSON when enabled."""

    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    as_json = _env_flag(JSON_LOGS_ENV) if json_logs is None else json_logs
    logger.log(level, json.dumps(payload, default=str) if as_json else payload)
