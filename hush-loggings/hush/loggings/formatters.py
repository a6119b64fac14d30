"""Formatters and the formatter registry.

A formatter is any object with a ``format(record) -> str`` method. Formatters are
process-wide singletons looked up by name; handlers hold a shared reference and
never own them.

Built-in formatters:
    default: plain text, suitable for files
    terminal: plain text with the level name coloured from the rich theme
    json: one JSON object per record
"""

import copy
import json
import logging
import sys
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol, TextIO, Tuple, Union

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console
from rich.theme import Theme

from .theme import LOGGING_THEME, level_style


DEFAULT_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

TERMINAL_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
TERMINAL_DATEFMT = "%H:%M:%S"


class Formatter(Protocol):
    """Anything that can render a record into a display string."""

    def format(self, record: logging.LogRecord) -> str:
        ...


class TerminalFormatter(logging.Formatter):
    """Text formatter that colours the level name for terminal output.

    With ``color_system="auto"`` rich inspects ``sys.stderr`` (tty, ``TERM``,
    ``NO_COLOR``, ``FORCE_COLOR``) and picks the colour system, so records
    written to a pipe or a file stay free of ANSI codes.

    Args:
        fmt: %-style format string (default: TERMINAL_FORMAT)
        datefmt: Date format (default: TERMINAL_DATEFMT)
        theme: Rich theme providing ``logging.level.<name>`` styles
        color_system: "auto", a rich ColorSystem, or None to disable colour
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        theme: Theme = LOGGING_THEME,
        color_system: Union[str, ColorSystem, None] = "auto",
    ):
        super().__init__(fmt or TERMINAL_FORMAT, datefmt or TERMINAL_DATEFMT)
        self.theme = theme
        self.color_system = color_system
        self._detected: Optional[Tuple[TextIO, Optional[ColorSystem]]] = None

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so other handlers see the original level name
        record = copy.copy(record)
        padded = f"{record.levelname:<8}"
        style = level_style(record.levelname, self.theme)
        color_system = self.resolve_color_system()
        if style is not None and color_system is not None:
            padded = style.render(padded, color_system=color_system)
        record.levelname = padded
        return super().format(record)

    def resolve_color_system(self) -> Optional[ColorSystem]:
        """Return the colour system to render with, detecting it when "auto"."""
        if self.color_system != "auto":
            return self.color_system

        # Re-detect whenever sys.stderr is swapped (redirection, capture)
        stream = sys.stderr
        detected = self._detected
        if detected is None or detected[0] is not stream:
            console = Console(file=stream)
            system = None if console.no_color else COLOR_SYSTEMS.get(console.color_system)
            detected = self._detected = (stream, system)
        return detected[1]


class JSONFormatter(logging.Formatter):
    """Render each record as a single-line JSON object.

    Output format:
    {
        "timestamp": "2026-02-08T20:30:00.123456+00:00",
        "level": "INFO",
        "logger": "my_app.module",
        "message": "User logged in",
        "context": {...}  # Optional, from extra={"context": {...}}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            log_data["context"] = context

        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, default=str)


_FORMATTERS: Dict[str, Formatter] = {}
_LOCK = threading.Lock()


def register_formatter(name: str, formatter: Formatter) -> None:
    """Register a formatter under ``name``. Last registration wins."""
    with _LOCK:
        _FORMATTERS[name] = formatter


def get_formatter(name: str) -> Optional[Formatter]:
    """Return the formatter registered under ``name``, or None."""
    with _LOCK:
        return _FORMATTERS.get(name)


def unregister_formatter(name: str) -> bool:
    with _LOCK:
        return _FORMATTERS.pop(name, None) is not None


def formatter_names() -> List[str]:
    with _LOCK:
        return sorted(_FORMATTERS)


DEFAULT_FORMATTER = logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATEFMT)
TERMINAL_FORMATTER = TerminalFormatter()

register_formatter("default", DEFAULT_FORMATTER)
register_formatter("terminal", TERMINAL_FORMATTER)
register_formatter("json", JSONFormatter())
