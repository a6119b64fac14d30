"""Shared fixtures and utilities for pytest test suite."""

import io
import logging

import pytest

from hush.loggings import (
    HANDLER_REGISTRY,
    LoggingConfigurator,
    StreamHandler,
    get_level_name,
)


# ============================================================
# Common Test Utilities
# ============================================================

def make_record(level: int, msg: str = "test message", name: str = "test", **extra) -> logging.LogRecord:
    """Build a LogRecord the way logging.Logger would."""
    record = logging.makeLogRecord({
        "name": name,
        "levelno": level,
        "levelname": get_level_name(level),
        "msg": msg,
        "args": (),
    })
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class PlainFormatter:
    """Formatter returning only the message, so output is easy to assert."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


class BrokenFormatter:
    """Formatter that always fails."""

    def format(self, record: logging.LogRecord) -> str:
        raise ValueError("broken formatter")


# ============================================================
# Common Fixtures
# ============================================================

@pytest.fixture
def buffer():
    """In-memory text sink."""
    return io.StringIO()


@pytest.fixture
def stream_handler(buffer):
    """StreamHandler writing plain messages at DEBUG to an in-memory buffer."""
    return StreamHandler(stream=buffer, level=logging.DEBUG, formatter=PlainFormatter())


@pytest.fixture
def configurator():
    """Configurator over a private copy of the global registry."""
    configurator = LoggingConfigurator(registry=HANDLER_REGISTRY.copy())
    yield configurator
    configurator.shutdown()


@pytest.fixture
def isolated_loggers():
    """Restore handlers, levels and flags of loggers touched by a test."""
    touched = {}

    def _get(name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        if name not in touched:
            touched[name] = (list(logger.handlers), logger.level, logger.propagate, logger.disabled)
        return logger

    yield _get

    for name, (handlers, level, propagate, disabled) in touched.items():
        logger = logging.getLogger(name)
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate
        logger.disabled = disabled
