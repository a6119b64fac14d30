"""File handlers."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Mapping, Optional, TextIO, Union

from ..exceptions import (
    HandlerClosedError,
    HandlerNotConfiguredError,
    HandlerOpenError,
    MissingFieldError,
)
from ..formatters import Formatter
from ..levels import NOTHING
from ..reflect import ConfigReflect
from .base import LevelFormatHandler

FILE_MODE = 0o660


class FileHandler(LevelFormatHandler):
    """Appends formatted records to a file it owns.

    The file is opened (append/create) when the handler is configured and closed
    by ``close``. Handling a record before a file is open, or after close, is a
    programmer error and raises instead of silently dropping the record.

    Config keys:
        filename: Path to the log file (required)
        name: Handler name (default: "")
        level: Minimum level name (default: NOTHING)
        formatter: Registered formatter name (default: default)
        encoding: File encoding (default: utf-8)

    Args:
        filename: Open this file immediately instead of waiting for load_config
        name: Handler name
        level: Minimum level; records strictly below it are suppressed
        formatter: Formatter instance (default: the ``default`` formatter)
        encoding: File encoding
    """

    default_formatter = "default"

    def __init__(
        self,
        filename: Optional[Union[str, Path]] = None,
        name: str = "",
        level: int = NOTHING,
        formatter: Optional[Formatter] = None,
        encoding: str = "utf-8",
    ):
        super().__init__(name=name, level=level, formatter=formatter)
        self.encoding = encoding
        self.path: Optional[str] = None
        self.stream: Optional[TextIO] = None
        if filename:
            self.open(filename)

    def load_config(self, config: Mapping[str, Any]) -> None:
        reflect = ConfigReflect(config)
        path = reflect.get_str("filename", "")
        if not path:
            raise MissingFieldError("filename", "should provide a valid file path")

        # Resolve everything else first so a bad formatter does not leak a descriptor
        super().load_config(config)
        self.encoding = reflect.get_str("encoding", self.encoding)
        self.open(path)

    def open(self, path: Union[str, Path]) -> None:
        """Open ``path`` for appending, replacing any file already open.

        Raises:
            HandlerOpenError: If the file or its parent directory can not be created
        """
        stream = self._open_stream(str(path))
        with self._lock:
            previous, self.stream = self.stream, stream
            self.path = str(path)
            self.closed = False
        if previous is not None:
            previous.close()

    def _open_stream(self, path: str) -> TextIO:
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, FILE_MODE)
        except OSError as e:
            raise HandlerOpenError(path, e) from e
        try:
            return os.fdopen(fd, "a", encoding=self.encoding)
        except (OSError, LookupError) as e:
            os.close(fd)
            raise HandlerOpenError(path, e if isinstance(e, OSError) else None) from e

    def _check_open(self) -> None:
        if self.closed:
            raise HandlerClosedError(
                "file handler is closed", context={"name": self.name, "path": self.path}
            )
        if self.path is None:
            raise HandlerNotConfiguredError(
                "you should set output file before using this handler", context={"name": self.name}
            )

    def handle(self, record: logging.LogRecord) -> bool:
        self._check_open()
        if self.filter(record):
            return False
        with self._lock:
            # close() may have won the race for the lock
            self._check_open()
            if self.stream is None:
                # A failed rollover could not reopen the file, try again
                self.stream = self._open_stream(self.path)
            self.emit(record)
        return True

    def emit(self, record: logging.LogRecord) -> None:
        msg = self.format(record)
        self.stream.write(msg + self.terminator)
        self.stream.flush()

    def close(self) -> None:
        with self._lock:
            stream, self.stream = self.stream, None
            self.closed = True
        if stream is not None:
            stream.close()


class RotatingFileHandler(FileHandler):
    """File handler that rotates its file once it would reach ``max_bytes``.

    On rollover ``app.log`` becomes ``app.log.1``, ``app.log.1`` becomes
    ``app.log.2`` and so on up to ``backup_count``; the oldest backup is
    discarded. The size check and the renames are delegated to the standard
    library's ``logging.handlers.RotatingFileHandler``, so the same rules
    apply: ``max_bytes=0`` or ``backup_count=0`` disables rotation.

    A rollover that fails (a backup path taken by a directory, a permission
    error) is reported on stderr and the record is still written to the
    reopened file.

    Config keys (in addition to FileHandler's):
        max_bytes: Max file size before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """

    def __init__(
        self,
        filename: Optional[Union[str, Path]] = None,
        name: str = "",
        level: int = NOTHING,
        formatter: Optional[Formatter] = None,
        encoding: str = "utf-8",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ):
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._rotator: Optional[logging.handlers.RotatingFileHandler] = None
        super().__init__(
            filename=filename, name=name, level=level, formatter=formatter, encoding=encoding
        )

    def load_config(self, config: Mapping[str, Any]) -> None:
        reflect = ConfigReflect(config)
        self.max_bytes = max(0, reflect.get_int("max_bytes", self.max_bytes))
        self.backup_count = max(0, reflect.get_int("backup_count", self.backup_count))
        super().load_config(config)

    def open(self, path: Union[str, Path]) -> None:
        super().open(path)
        # delay=True: the rotator never opens the file itself, it borrows ours
        rotator = logging.handlers.RotatingFileHandler(
            str(path),
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding=self.encoding,
            delay=True,
        )
        rotator.setFormatter(logging.Formatter("%(message)s"))
        with self._lock:
            previous, self._rotator = self._rotator, rotator
        if previous is not None:
            _detach(previous)

    def emit(self, record: logging.LogRecord) -> None:
        msg = self.format(record)
        if self.max_bytes > 0 and self.backup_count > 0:
            self._rollover_if_needed(msg)
        self.stream.write(msg + self.terminator)
        self.stream.flush()

    def _rollover_if_needed(self, msg: str) -> None:
        """Rotate before writing ``msg``. Called with the handler lock held."""
        rotator = self._rotator
        rotator.stream = self.stream
        try:
            if rotator.shouldRollover(logging.makeLogRecord({"msg": msg})):
                rotator.doRollover()
        except OSError as e:
            sys.stderr.write(f"Rotate log file failed, [{e}]\n")
        finally:
            # doRollover closes the stream and, with delay=True, leaves it closed
            if rotator.stream is None:
                self.stream = None
                rotator.stream = self._open_stream(self.path)
            self.stream = rotator.stream

    def close(self) -> None:
        super().close()
        with self._lock:
            rotator, self._rotator = self._rotator, None
        if rotator is not None:
            _detach(rotator)


def _detach(rotator: logging.Handler) -> None:
    # The stream belongs to RotatingFileHandler, do not let the rotator close it
    rotator.stream = None
    rotator.close()
