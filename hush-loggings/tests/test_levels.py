"""Tests for the level registry and lenient config access."""

import logging

import pytest

from hush.loggings import (
    CRITICAL,
    DEBUG,
    INFO,
    NOTHING,
    WARNING,
    ConfigurationError,
    add_level,
    get_level_by_name,
    get_level_name,
)
from hush.loggings.reflect import ConfigReflect


@pytest.mark.parametrize(
    "name, expected",
    [
        ("DEBUG", DEBUG),
        ("info", INFO),
        ("Warn", WARNING),
        ("FATAL", CRITICAL),
        ("NOTHING", NOTHING),
    ],
)
def test_known_level_names(name, expected):
    assert get_level_by_name(name) == expected


def test_unknown_level_silences():
    assert get_level_by_name("VERBOSE") == NOTHING
    assert get_level_by_name(None) == NOTHING


def test_levels_match_stdlib():
    assert DEBUG == logging.DEBUG
    assert INFO == logging.INFO
    assert CRITICAL == logging.CRITICAL
    assert NOTHING > logging.CRITICAL


def test_level_names():
    assert get_level_name(WARNING) == "WARNING"
    assert get_level_name(NOTHING) == "NOTHING"
    assert get_level_name(12) == "Level 12"


def test_add_level():
    add_level("trace", 5)
    assert get_level_by_name("TRACE") == 5
    assert get_level_name(5) == "TRACE"


def test_reflect_defaults_on_missing_and_wrong_type():
    config = ConfigReflect({"level": 10, "name": "console", "max_bytes": True, "count": 3})

    assert config.get_str("name", "") == "console"
    assert config.get_str("level", "NOTHING") == "NOTHING"
    assert config.get_str("missing", "fallback") == "fallback"
    assert config.get_int("max_bytes", 100) == 100
    assert config.get_int("count", 0) == 3
    assert config.get_bool("count", False) is False
    assert "name" in config


def test_reflect_rejects_non_mapping():
    with pytest.raises(ConfigurationError):
        ConfigReflect(["level", "DEBUG"])
