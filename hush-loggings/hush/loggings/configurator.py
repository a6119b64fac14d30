"""Build a logging topology from a configuration document.

Loading is all-or-nothing: every handler in the document is constructed and
configured before anything is wired into the standard-library logger tree. If
one step fails, the handlers built so far are closed, formatters declared by the
document are rolled back and the error propagates; the active topology is left
untouched.

Example:
    from hush.loggings import load_json_config, get_handler

    load_json_config('''{
        "handlers": {
            "console": {"class": "StreamHandler", "level": "INFO", "formatter": "default"}
        },
        "loggers": {"app": {"level": "DEBUG", "handlers": ["console"]}}
    }''')

    logging.getLogger("app").info("ready")
    get_handler("console")
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Set, Union

import yaml
from pydantic import ValidationError

from .config import FormatterConfig, LogConfig, LoggerConfig
from .exceptions import ConfigurationError, MissingFieldError
from .formatters import get_formatter, register_formatter, unregister_formatter
from .handlers.base import Handler
from .levels import get_level_by_name
from .loggers import LOGGER, add_handler, bridged_handlers
from .registry import HANDLER_REGISTRY, HandlerRegistry


def _get_logger(name: str) -> logging.Logger:
    if name in ("", "root"):
        return logging.getLogger()
    return logging.getLogger(name)


class LoggingConfigurator:
    """Owns the handlers built from configuration documents.

    Args:
        registry: Handler registry used to construct handlers by class name
            (default: the process-wide HANDLER_REGISTRY)
    """

    def __init__(self, registry: Optional[HandlerRegistry] = None):
        self.registry = registry if registry is not None else HANDLER_REGISTRY
        self._handlers: Dict[str, Handler] = {}
        self._loggers: Set[str] = set()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_handler(self, name: str) -> Optional[Handler]:
        with self._lock:
            return self._handlers.get(name)

    def handler_names(self) -> List[str]:
        with self._lock:
            return sorted(self._handlers)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, data: Union[LogConfig, Mapping[str, Any]]) -> None:
        """Load a configuration document.

        Raises:
            ConfigurationError: If the document is invalid or any handler fails
                to build; nothing is changed in that case
        """
        config = self._validate(data)

        with self._lock:
            restore_formatters = self._register_formatters(config.formatters)
            built: Dict[str, Handler] = {}
            try:
                for name, entry in config.handlers.items():
                    built[name] = self._build_handler(name, entry)
                self._check_logger_references(config.loggers, built)
            except Exception as e:
                for handler in built.values():
                    self._close_quietly(handler)
                restore_formatters()
                LOGGER.warning("Logging config load aborted: %s", e)
                raise

            self._commit(config, built)

        LOGGER.info(
            "Loaded logging config: %d handler(s), %d logger(s)",
            len(config.handlers),
            len(config.loggers),
        )

    def load_json(self, text: Union[str, bytes]) -> None:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"invalid JSON logging config: {e}") from e
        self.load(data)

    def load_yaml(self, text: str) -> None:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid YAML logging config: {e}") from e
        self.load(data if data is not None else {})

    def load_file(self, file_path: Union[str, Path], encoding: str = "utf-8") -> None:
        """Load a ``.json``, ``.yaml`` or ``.yml`` configuration file.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the suffix is unsupported or the content invalid
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Logging config file not found: {file_path}")

        suffix = file_path.suffix.lower()
        if suffix not in (".json", ".yaml", ".yml"):
            raise ConfigurationError(
                f"Unsupported logging config format: {suffix}. Use .json, .yaml or .yml"
            )

        text = file_path.read_text(encoding=encoding)
        if suffix == ".json":
            self.load_json(text)
        else:
            self.load_yaml(text)

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    def shutdown(self) -> None:
        """Detach and close every handler this configurator built."""
        with self._lock:
            handlers = list(self._handlers.values())
            self._detach(handlers)
            for handler in handlers:
                self._close_quietly(handler)
            self._handlers.clear()
            self._loggers.clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(data: Union[LogConfig, Mapping[str, Any]]) -> LogConfig:
        if isinstance(data, LogConfig):
            return data
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"logging config must be a mapping, got {type(data).__name__}"
            )
        try:
            return LogConfig.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(f"invalid logging config: {e}") from e

    @staticmethod
    def _register_formatters(formatters: Dict[str, FormatterConfig]) -> Callable[[], None]:
        """Register document formatters, returning a callable that undoes it."""
        previous = {name: get_formatter(name) for name in formatters}

        def restore() -> None:
            for name, formatter in previous.items():
                if formatter is None:
                    unregister_formatter(name)
                else:
                    register_formatter(name, formatter)

        try:
            for name, fc in formatters.items():
                register_formatter(name, logging.Formatter(fc.format, fc.datefmt, fc.style))
        except ValueError as e:
            restore()
            raise ConfigurationError(f"invalid formatter: {e}") from e
        return restore

    def _build_handler(self, name: str, entry: Dict[str, Any]) -> Handler:
        class_name = entry.get("class")
        if not isinstance(class_name, str) or not class_name:
            raise MissingFieldError("class", f"handler {name!r} must name a registered class")

        handler = self.registry.create(class_name)
        if not isinstance(handler, Handler):
            raise ConfigurationError(
                f"handler class {class_name} does not produce a Handler",
                context={"handler": name},
            )

        try:
            handler.load_config({"name": name, **entry})
        except Exception as e:
            # Whatever load_config managed to open must not leak
            self._close_quietly(handler)
            if isinstance(e, ConfigurationError):
                e.context.setdefault("handler", name)
            raise
        return handler

    def _check_logger_references(
        self, loggers: Dict[str, LoggerConfig], built: Dict[str, Handler]
    ) -> None:
        for logger_name, lc in loggers.items():
            for handler_name in lc.handlers:
                if handler_name not in built and handler_name not in self._handlers:
                    raise ConfigurationError(
                        f"logger {logger_name!r} references unknown handler: {handler_name}"
                    )

    def _commit(self, config: LogConfig, built: Dict[str, Handler]) -> None:
        replaced = [
            self._handlers[name]
            for name, handler in built.items()
            if name in self._handlers and self._handlers[name] is not handler
        ]

        if config.disable_existing_loggers:
            self._disable_existing_loggers(config.loggers)

        self._detach(replaced)
        self._handlers.update(built)

        for logger_name, lc in config.loggers.items():
            logger = _get_logger(logger_name)
            for bridge in bridged_handlers(logger):
                logger.removeHandler(bridge)
            logger.setLevel(get_level_by_name(lc.level))
            logger.propagate = lc.propagate
            logger.disabled = False
            for handler_name in lc.handlers:
                add_handler(logger, self._handlers[handler_name])
            self._loggers.add(logger_name)

        for handler in replaced:
            self._close_quietly(handler)

    def _detach(self, handlers: List[Handler]) -> None:
        """Remove the bridges pointing at ``handlers`` from every wired logger."""
        if not handlers:
            return
        for logger_name in self._loggers:
            logger = _get_logger(logger_name)
            for bridge in bridged_handlers(logger):
                if any(bridge.target is h for h in handlers):
                    logger.removeHandler(bridge)

    @staticmethod
    def _disable_existing_loggers(configured: Dict[str, LoggerConfig]) -> None:
        for name, logger in list(logging.root.manager.loggerDict.items()):
            if not isinstance(logger, logging.Logger):
                continue
            if any(name == c or name.startswith(c + ".") for c in configured):
                continue
            logger.disabled = True

    @staticmethod
    def _close_quietly(handler: Handler) -> None:
        try:
            handler.close()
        except OSError as e:
            LOGGER.warning("Failed to close handler %r: %s", handler, e)


# Process-wide configurator used by the module-level helpers
CONFIGURATOR = LoggingConfigurator()


def load_config(data: Union[LogConfig, Mapping[str, Any]]) -> None:
    CONFIGURATOR.load(data)


def load_json_config(text: Union[str, bytes]) -> None:
    CONFIGURATOR.load_json(text)


def load_yaml_config(text: str) -> None:
    CONFIGURATOR.load_yaml(text)


def load_config_file(file_path: Union[str, Path]) -> None:
    CONFIGURATOR.load_file(file_path)


def get_handler(name: str) -> Optional[Handler]:
    return CONFIGURATOR.get_handler(name)


def handler_names() -> List[str]:
    return CONFIGURATOR.handler_names()


def shutdown() -> None:
    CONFIGURATOR.shutdown()
