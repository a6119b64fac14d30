"""Tests for the handler registry."""

import pytest

from hush.loggings import (
    HANDLER_REGISTRY,
    Configurable,
    FileHandler,
    Handler,
    HandlerRegistry,
    NullHandler,
    RotatingFileHandler,
    StreamHandler,
    UnknownHandlerClassError,
    get_constructor,
    register_handler,
)


class MockHandler(NullHandler):
    """Mock handler recording its config."""

    def __init__(self):
        super().__init__()
        self.config = None

    def load_config(self, config):
        self.config = dict(config)


@pytest.fixture
def registry():
    return HandlerRegistry()


def test_register_then_lookup_builds_registered_type(registry):
    registry.register_constructor("Mock", MockHandler)

    ctor = registry.get_constructor("Mock")
    assert ctor is not None

    handler = ctor()
    assert isinstance(handler, MockHandler)
    assert isinstance(handler, Handler)
    assert isinstance(handler, Configurable)


def test_unknown_key_reports_not_found(registry):
    assert registry.get_constructor("Missing") is None
    assert "Missing" not in registry


def test_create_unknown_raises(registry):
    with pytest.raises(UnknownHandlerClassError, match="unknown handler class: Missing"):
        registry.create("Missing")


def test_constructor_produces_fresh_instances(registry):
    registry.register_constructor("Mock", MockHandler)
    assert registry.create("Mock") is not registry.create("Mock")


def test_last_registration_wins(registry):
    registry.register_constructor("Sink", NullHandler)
    registry.register_constructor("Sink", MockHandler)

    assert isinstance(registry.create("Sink"), MockHandler)
    assert len(registry) == 1


def test_names_unregister_and_clear(registry):
    registry.register_constructor("B", NullHandler)
    registry.register_constructor("A", MockHandler)
    assert registry.names() == ["A", "B"]

    assert registry.unregister("A") is True
    assert registry.unregister("A") is False
    assert registry.names() == ["B"]

    registry.clear()
    assert len(registry) == 0


def test_copy_is_independent(registry):
    registry.register_constructor("Mock", MockHandler)
    clone = registry.copy()
    clone.unregister("Mock")

    assert "Mock" in registry
    assert "Mock" not in clone


@pytest.mark.parametrize(
    "class_name, expected",
    [
        ("NullHandler", NullHandler),
        ("StreamHandler", StreamHandler),
        ("FileHandler", FileHandler),
        ("RotatingFileHandler", RotatingFileHandler),
    ],
)
def test_builtin_handlers_registered(class_name, expected):
    ctor = get_constructor(class_name)
    assert ctor is not None
    assert type(ctor()) is expected


def test_register_handler_decorator():
    @register_handler("DecoratedTestHandler")
    class DecoratedHandler(MockHandler):
        pass

    try:
        assert isinstance(HANDLER_REGISTRY.create("DecoratedTestHandler"), DecoratedHandler)
    finally:
        HANDLER_REGISTRY.unregister("DecoratedTestHandler")


def test_register_handler_decorator_defaults_to_class_name():
    @register_handler()
    class AnotherTestHandler(MockHandler):
        pass

    try:
        assert "AnotherTestHandler" in HANDLER_REGISTRY
    finally:
        HANDLER_REGISTRY.unregister("AnotherTestHandler")
