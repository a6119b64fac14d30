"""Level registry.

Levels are ordered integers; lower values are more verbose. Values match the
standard library so records produced by ``logging`` compare correctly.
``NOTHING`` is the maximal threshold and suppresses every record.
"""

import threading
from typing import Dict

NOTSET = 0
DEBUG = 10
INFO = 20
WARNING = 30
ERROR = 40
CRITICAL = 50
NOTHING = 2**31 - 1

_LOCK = threading.Lock()

_NAME_TO_LEVEL: Dict[str, int] = {
    "NOTSET": NOTSET,
    "DEBUG": DEBUG,
    "INFO": INFO,
    "WARNING": WARNING,
    "WARN": WARNING,
    "ERROR": ERROR,
    "CRITICAL": CRITICAL,
    "FATAL": CRITICAL,
    "NOTHING": NOTHING,
}

_LEVEL_TO_NAME: Dict[int, str] = {
    NOTSET: "NOTSET",
    DEBUG: "DEBUG",
    INFO: "INFO",
    WARNING: "WARNING",
    ERROR: "ERROR",
    CRITICAL: "CRITICAL",
    NOTHING: "NOTHING",
}


def get_level_by_name(name: str) -> int:
    """Resolve a level name (case-insensitive) to its integer value.

    Unknown names resolve to ``NOTHING`` so a typo in a configuration file
    silences a handler instead of crashing the load.

    Example:
        >>> get_level_by_name("info")
        20
        >>> get_level_by_name("verbose") == NOTHING
        True
    """
    if not isinstance(name, str):
        return NOTHING
    with _LOCK:
        return _NAME_TO_LEVEL.get(name.strip().upper(), NOTHING)


def get_level_name(level: int) -> str:
    """Return the registered name for ``level``, or ``"Level <n>"``."""
    with _LOCK:
        return _LEVEL_TO_NAME.get(level, f"Level {level}")


def add_level(name: str, level: int) -> None:
    """Register an additional level name. Last registration wins."""
    name = name.strip().upper()
    with _LOCK:
        _NAME_TO_LEVEL[name] = level
        _LEVEL_TO_NAME[level] = name
