from __future__ import annotations

import logging

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def resolve_level(level: str | int) -> int:
    """Level-Name oder Zahl -> logging-Level. Unbekannte Namen -> WARNING."""
    if isinstance(level, int):
        return level
    return _LEVELS.get(level.strip().upper(), logging.WARNING)


def setup_logging(level: str | int) -> None:
    """
    Richtet logging einmal zentral ein.
    Das Level kommt aus AppConfig.log_level.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
