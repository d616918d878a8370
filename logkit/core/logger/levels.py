"""Level-name parsing. Levels are stdlib logging ints, as structlog expects."""
from __future__ import annotations

import logging

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_level(level: str) -> int:
    """Map a level name to its severity; unknown or empty names give INFO."""
    return _LEVELS.get((level or "").strip().lower(), logging.INFO)


def level_name(level: int) -> str:
    return logging.getLevelName(level).lower()
