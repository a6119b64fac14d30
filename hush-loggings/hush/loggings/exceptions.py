"""Error types raised by hush-loggings.

Configuration errors are recoverable: they are raised while a handler is being
built and propagate to the configurator, which aborts the whole load.
State errors signal programmer misuse of a handler at runtime.
"""

from typing import Any, Dict, Optional


class LoggingError(Exception):
    """Base class for all hush-loggings errors.

    Args:
        message: Human-readable error message
        context: Optional extra information (handler name, key, path, ...)
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context if context is not None else {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"


class ConfigurationError(LoggingError, ValueError):
    """A configuration map or document is malformed."""


class UnknownHandlerClassError(ConfigurationError):
    """No constructor is registered under the requested handler class."""

    def __init__(self, class_name: str):
        super().__init__(f"unknown handler class: {class_name}")
        self.class_name = class_name


class UnknownFormatterError(ConfigurationError):
    """A handler references a formatter name that is not registered."""

    def __init__(self, formatter_name: str):
        super().__init__(f"can not find formatter: {formatter_name}")
        self.formatter_name = formatter_name


class MissingFieldError(ConfigurationError):
    """A required configuration key is absent or empty."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"missing required field: {field}")
        self.field = field


class HandlerOpenError(ConfigurationError):
    """A handler could not acquire its output destination."""

    def __init__(self, path: str, original_exception: Optional[OSError] = None):
        message = f"can not open file {path}"
        if original_exception is not None:
            message = f"{message}: {original_exception}"
        super().__init__(message)
        self.path = path
        self.original_exception = original_exception


class HandlerStateError(LoggingError, RuntimeError):
    """A handler was used in a state that does not allow it."""


class HandlerNotConfiguredError(HandlerStateError):
    """Handle was called before the handler had an output destination."""


class HandlerClosedError(HandlerStateError):
    """Handle was called after the handler was closed."""
