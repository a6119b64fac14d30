"""Structured logging with pluggable, configuration-assembled handlers.

Handlers are built by class name from a registry, configure themselves from
plain config maps and serialize their own writes, so many threads can log
through one handler safely.

Modules:
    registry: Handler class registry (the extension point)
    handlers: Null, stream, file and rotating file handlers
    formatters: Formatter registry and built-in formatters
    levels: Level registry
    configurator: All-or-nothing loading of configuration documents
    loggers: Standard-library logger bridge

Example:
    import logging
    from hush.loggings import load_config, get_handler

    load_config({
        "handlers": {
            "console": {"class": "StreamHandler", "level": "INFO"},
            "file": {"class": "FileHandler", "filename": "logs/app.log", "level": "DEBUG"},
        },
        "loggers": {"app": {"level": "DEBUG", "handlers": ["console", "file"]}},
    })
    logging.getLogger("app").info("Hello world")

    # Extend with custom handlers
    from hush.loggings import Configurable, Handler, register_handler

    @register_handler("KafkaHandler")
    class KafkaHandler(Handler, Configurable):
        ...
"""

from .config import FormatterConfig, LogConfig, LoggerConfig
from .configurator import (
    CONFIGURATOR,
    LoggingConfigurator,
    get_handler,
    handler_names,
    load_config,
    load_config_file,
    load_json_config,
    load_yaml_config,
    shutdown,
)
from .exceptions import (
    ConfigurationError,
    HandlerClosedError,
    HandlerNotConfiguredError,
    HandlerOpenError,
    HandlerStateError,
    LoggingError,
    MissingFieldError,
    UnknownFormatterError,
    UnknownHandlerClassError,
)
from .formatters import (
    JSONFormatter,
    TerminalFormatter,
    formatter_names,
    get_formatter,
    register_formatter,
)
from .handlers import (
    Configurable,
    FileHandler,
    Handler,
    LevelFormatHandler,
    NullHandler,
    RotatingFileHandler,
    StreamHandler,
)
from .levels import (
    CRITICAL,
    DEBUG,
    ERROR,
    INFO,
    NOTHING,
    NOTSET,
    WARNING,
    add_level,
    get_level_by_name,
    get_level_name,
)
from .loggers import LOGGER, BridgeHandler, add_handler, remove_handlers
from .registry import (
    HANDLER_REGISTRY,
    HandlerRegistry,
    get_constructor,
    register_constructor,
    register_handler,
)
from .theme import LOGGING_THEME


# Register built-in handlers
register_constructor("NullHandler", NullHandler)
register_constructor("StreamHandler", StreamHandler)
register_constructor("FileHandler", FileHandler)
register_constructor("RotatingFileHandler", RotatingFileHandler)


__version__ = "0.1.0"

__all__ = [
    # Registry
    "HANDLER_REGISTRY",
    "HandlerRegistry",
    "register_constructor",
    "get_constructor",
    "register_handler",
    # Handlers
    "Handler",
    "Configurable",
    "LevelFormatHandler",
    "NullHandler",
    "StreamHandler",
    "FileHandler",
    "RotatingFileHandler",
    # Formatters
    "TerminalFormatter",
    "JSONFormatter",
    "register_formatter",
    "get_formatter",
    "formatter_names",
    # Levels
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
    "NOTHING",
    "get_level_by_name",
    "get_level_name",
    "add_level",
    # Configuration
    "LogConfig",
    "LoggerConfig",
    "FormatterConfig",
    "LoggingConfigurator",
    "CONFIGURATOR",
    "load_config",
    "load_json_config",
    "load_yaml_config",
    "load_config_file",
    "get_handler",
    "handler_names",
    "shutdown",
    # Standard-library bridge
    "LOGGER",
    "BridgeHandler",
    "add_handler",
    "remove_handlers",
    # Errors
    "LoggingError",
    "ConfigurationError",
    "UnknownHandlerClassError",
    "UnknownFormatterError",
    "MissingFieldError",
    "HandlerOpenError",
    "HandlerStateError",
    "HandlerNotConfiguredError",
    "HandlerClosedError",
    # Theme
    "LOGGING_THEME",
]
