"""Standard-library logger integration.

The logger tree itself belongs to Python's ``logging`` module. This module only
attaches hush handlers to it through ``BridgeHandler`` and provides the
library's own diagnostic ``LOGGER``.
"""

import logging
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .handlers.base import Handler


class BridgeHandler(logging.Handler):
    """Forward records from a ``logging.Logger`` to a hush handler.

    The bridge itself never filters (its level is NOTSET); the wrapped handler
    applies its own level.
    """

    def __init__(self, target: "Handler"):
        super().__init__(logging.NOTSET)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        self.target.handle(record)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} -> {self.target!r}>"


def add_handler(logger: logging.Logger, handler: "Handler") -> logging.Logger:
    """Attach a hush handler to a standard-library logger.

    Args:
        logger: The logger to add the handler to
        handler: The hush handler receiving the logger's records

    Returns:
        The logger with the handler attached
    """
    logger.addHandler(BridgeHandler(handler))
    return logger


def remove_handlers(logger: logging.Logger) -> logging.Logger:
    """Detach every bridged hush handler from a logger.

    Plain ``logging`` handlers are left in place. The hush handlers are not
    closed; their lifetime belongs to whoever created them.
    """
    for bridge in bridged_handlers(logger):
        logger.removeHandler(bridge)
    return logger


def bridged_handlers(logger: logging.Logger) -> List[BridgeHandler]:
    return [h for h in logger.handlers if isinstance(h, BridgeHandler)]


# Library diagnostics stay silent unless the host application configures them
LOGGER = logging.getLogger("hush.loggings")
LOGGER.addHandler(logging.NullHandler())
