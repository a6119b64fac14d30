"""Stream handler."""

import logging
import sys
from typing import Optional, TextIO

from ..formatters import Formatter
from ..levels import NOTHING
from .base import LevelFormatHandler


class StreamHandler(LevelFormatHandler):
    """Writes formatted records, one per line, to a text stream.

    The stream is not owned, so ``close`` is a no-op: it may be
    ``sys.stderr`` or ``sys.stdout``, which outlive the handler.

    Config keys:
        name: Handler name (default: "")
        level: Minimum level name (default: NOTHING)
        formatter: Registered formatter name (default: terminal)

    Args:
        stream: Output stream (default: sys.stderr at write time)
        name: Handler name
        level: Minimum level; records strictly below it are suppressed
        formatter: Formatter instance (default: the ``terminal`` formatter)
    """

    default_formatter = "terminal"

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        name: str = "",
        level: int = NOTHING,
        formatter: Optional[Formatter] = None,
    ):
        super().__init__(name=name, level=level, formatter=formatter)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so a replaced sys.stderr (e.g. under pytest) is honoured
        return self._stream if self._stream is not None else sys.stderr

    @stream.setter
    def stream(self, stream: Optional[TextIO]) -> None:
        self._stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        msg = self.format(record)
        stream = self.stream
        stream.write(msg + self.terminator)
        if hasattr(stream, "flush"):
            stream.flush()

    def close(self) -> None:
        # The stream belongs to the caller
        pass
