"""Logging handlers package.

Each handler implements two capabilities:
- Handler (filter, emit, handle, close) for runtime use
- Configurable (load_config) for construction from a config map

The built-in classes are registered in the handler registry when
``hush.loggings`` is imported.
"""

from .base import Configurable, Handler, LevelFormatHandler
from .file import FileHandler, RotatingFileHandler
from .null import NullHandler
from .stream import StreamHandler

__all__ = [
    # Contracts
    "Handler",
    "Configurable",
    "LevelFormatHandler",
    # Built-in handlers
    "NullHandler",
    "StreamHandler",
    "FileHandler",
    "RotatingFileHandler",
]
