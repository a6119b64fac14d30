"""Lenient typed access to untyped configuration maps."""

from typing import Any, Mapping

from .exceptions import ConfigurationError


class ConfigReflect:
    """Read typed values out of a plain mapping without ever failing.

    Every accessor returns the supplied default when the key is absent or the
    stored value has the wrong type.

    Example:
        config = ConfigReflect({"level": "DEBUG", "max_bytes": "big"})
        config.get_str("level", "NOTHING")    # "DEBUG"
        config.get_int("max_bytes", 1024)     # 1024
    """

    def __init__(self, data: Mapping[str, Any]):
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"handler config must be a mapping, got {type(data).__name__}"
            )
        self._data = data

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get_str(self, key: str, default: str = "") -> str:
        value = self._data.get(key, default)
        return value if isinstance(value, str) else default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._data.get(key, default)
        # bool is an int subclass but never a meaningful size or count
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key, default)
        return value if isinstance(value, bool) else default
