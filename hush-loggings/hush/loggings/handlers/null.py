"""Handler that discards everything."""

import logging
from typing import Any, Mapping

from .base import Configurable, Handler


class NullHandler(Handler, Configurable):
    """Suppresses every record and never produces output.

    Useful as a sink-to-nowhere in configurations and as a side-effect-free
    fixture in tests.
    """

    def __init__(self, name: str = ""):
        self.name = name

    def load_config(self, config: Mapping[str, Any]) -> None:
        name = config.get("name") if isinstance(config, Mapping) else None
        if isinstance(name, str):
            self.name = name

    def filter(self, record: logging.LogRecord) -> bool:
        return True

    def emit(self, record: logging.LogRecord) -> None:
        pass

    def handle(self, record: logging.LogRecord) -> bool:
        return False

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"<NullHandler name={self.name!r}>"
