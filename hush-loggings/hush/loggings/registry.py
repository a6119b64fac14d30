"""Name-keyed registry of handler constructors.

Handler modules register a zero-argument constructor under a class name once,
at import time. Configuration loading then builds handler instances by name
without importing the concrete classes.
"""

import threading
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Type, TypeVar

from .exceptions import UnknownHandlerClassError
from .loggers import LOGGER

if TYPE_CHECKING:
    from .handlers.base import Configurable

Constructor = Callable[[], "Configurable"]
T = TypeVar("T")


class HandlerRegistry:
    """Mapping from handler class name to constructor.

    Keys form a flat namespace; registering an existing key replaces the
    previous constructor without complaint. Lookups are lock-guarded, so one
    registry can serve concurrent configuration loads.

    Usage:
        registry = HandlerRegistry()
        registry.register_constructor("StreamHandler", StreamHandler)

        ctor = registry.get_constructor("StreamHandler")   # None if unknown
        handler = registry.create("StreamHandler")         # raises if unknown
    """

    def __init__(self):
        self._constructors: Dict[str, Constructor] = {}
        self._lock = threading.Lock()

    def register_constructor(self, name: str, ctor: Constructor) -> None:
        """Store ``ctor`` under ``name``, overwriting any previous entry."""
        with self._lock:
            replaced = name in self._constructors
            self._constructors[name] = ctor
        LOGGER.debug("Registered handler class: %s%s", name, " (replaced)" if replaced else "")

    def get_constructor(self, name: str) -> Optional[Constructor]:
        """Return the constructor registered under ``name``, or None."""
        with self._lock:
            return self._constructors.get(name)

    def create(self, name: str) -> "Configurable":
        """Build a fresh, unconfigured handler of class ``name``.

        Raises:
            UnknownHandlerClassError: If nothing is registered under ``name``
        """
        ctor = self.get_constructor(name)
        if ctor is None:
            raise UnknownHandlerClassError(name)
        return ctor()

    def unregister(self, name: str) -> bool:
        with self._lock:
            return self._constructors.pop(name, None) is not None

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._constructors)

    def clear(self) -> None:
        with self._lock:
            self._constructors.clear()

    def copy(self) -> "HandlerRegistry":
        """Return an independent registry with the same entries."""
        clone = HandlerRegistry()
        with self._lock:
            clone._constructors = dict(self._constructors)
        return clone

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._constructors

    def __len__(self) -> int:
        with self._lock:
            return len(self._constructors)


# Process-wide registry used by the module-level helpers and the configurator
HANDLER_REGISTRY = HandlerRegistry()


def register_constructor(name: str, ctor: Constructor) -> None:
    HANDLER_REGISTRY.register_constructor(name, ctor)


def get_constructor(name: str) -> Optional[Constructor]:
    return HANDLER_REGISTRY.get_constructor(name)


def register_handler(name: Optional[str] = None) -> Callable[[Type[T]], Type[T]]:
    """Class decorator registering a handler class in ``HANDLER_REGISTRY``.

    The class itself is used as the constructor, so it must be callable with no
    arguments. The class name is the key unless ``name`` is given.

    Example:
        @register_handler("KafkaHandler")
        class KafkaHandler(Handler, Configurable):
            ...
    """

    def decorator(cls: Type[T]) -> Type[T]:
        register_constructor(name or cls.__name__, cls)
        return cls

    return decorator
