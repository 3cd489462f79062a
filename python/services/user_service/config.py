"""
Runtime configuration read from environment variables.

``SERVER_HOST``, ``SERVER_PORT`` and ``LOG_LEVEL`` are read once at
startup by ``load_settings``.  An unusable port never stops the service
from starting; it falls back to ``DEFAULT_PORT`` instead.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def _parse_port(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid SERVER_PORT %r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("SERVER_PORT %d out of range, using %d", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def _parse_log_level(raw: Optional[str]) -> str:
    level = (raw or "").strip().upper()
    if level not in LOG_LEVELS:
        if level:
            logger.warning("Ignoring unknown LOG_LEVEL %r, using INFO", raw)
        return "INFO"
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build ``Settings`` from ``environ`` (``os.environ`` by default)."""
    if environ is None:
        environ = os.environ
    return Settings(
        host=environ.get("SERVER_HOST") or DEFAULT_HOST,
        port=_parse_port(environ.get("SERVER_PORT")),
        log_level=_parse_log_level(environ.get("LOG_LEVEL")),
    )
