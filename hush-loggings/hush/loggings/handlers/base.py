"""Handler contracts.

Two capabilities, composed explicitly by each variant:

- ``Handler``: runtime use (filter, emit, handle, close)
- ``Configurable``: construction-time setup from an untyped config map

A handler is built by its registry constructor, configured once with
``load_config``, used to ``handle`` records from many threads and finally
``close``d at shutdown.
"""

import logging
import sys
import threading
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ..exceptions import UnknownFormatterError
from ..formatters import Formatter, get_formatter
from ..levels import NOTHING, get_level_by_name, get_level_name
from ..reflect import ConfigReflect


class Handler(ABC):
    """Takes a record, decides whether to keep it and writes it somewhere."""

    name: str = ""

    @abstractmethod
    def filter(self, record: logging.LogRecord) -> bool:
        """Return True if the record should be suppressed."""

    @abstractmethod
    def emit(self, record: logging.LogRecord) -> None:
        """Write the record to the output without filtering or locking."""

    @abstractmethod
    def handle(self, record: logging.LogRecord) -> bool:
        """Filter then emit the record. Returns True if it was emitted."""

    @abstractmethod
    def close(self) -> None:
        """Release the handler's resources. Safe to call more than once."""


class Configurable(ABC):
    """Initializes its own state from an untyped configuration map."""

    @abstractmethod
    def load_config(self, config: Mapping[str, Any]) -> None:
        """Populate fields from ``config``.

        Raises:
            ConfigurationError: If the config cannot produce a working handler
        """


class LevelFormatHandler(Handler, Configurable):
    """Shared state and dispatch for handlers with a level and a formatter.

    ``handle`` runs filter, then emit under a per-instance lock, so two
    messages from one instance never interleave. Two instances writing to the
    same destination are not coordinated with each other.

    Subclasses implement ``emit`` and usually extend ``load_config``.
    """

    default_formatter = "default"
    terminator = "\n"

    def __init__(
        self,
        name: str = "",
        level: int = NOTHING,
        formatter: Optional[Formatter] = None,
    ):
        self.name = name
        self.level = level
        self.formatter = formatter if formatter is not None else get_formatter(self.default_formatter)
        self.closed = False
        self._lock = threading.Lock()

    def load_config(self, config: Mapping[str, Any]) -> None:
        reflect = ConfigReflect(config)
        self.name = reflect.get_str("name", "")
        self.level = get_level_by_name(reflect.get_str("level", "NOTHING"))

        formatter_name = reflect.get_str("formatter", self.default_formatter)
        formatter = get_formatter(formatter_name)
        if formatter is None:
            raise UnknownFormatterError(formatter_name)
        self.formatter = formatter

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level

    def handle(self, record: logging.LogRecord) -> bool:
        if self.filter(record):
            return False
        with self._lock:
            self.emit(record)
        return True

    def format(self, record: logging.LogRecord) -> str:
        """Format a record, degrading to an empty message on failure.

        The failure is reported on standard error, never on the handler's own
        output, and never propagates to the caller.
        """
        try:
            return self.formatter.format(record)
        except Exception as e:
            sys.stderr.write(f"Format record failed, [{e}]\n")
            return ""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} level={get_level_name(self.level)}>"
