"""Logging configuration document models."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class FormatterConfig(BaseModel):
    """Extra formatter declared by a configuration document.

    Args:
        format: Format string (default: logging's "%(message)s")
        datefmt: Date format for %(asctime)s
        style: Format string style ("%", "{" or "$")

    Example:
        {"format": "%(levelname)s %(message)s", "datefmt": "%H:%M:%S"}
    """

    model_config = ConfigDict(extra="ignore")

    format: Optional[str] = None
    datefmt: Optional[str] = None
    style: Literal["%", "{", "$"] = "%"


class LoggerConfig(BaseModel):
    """Wiring of one standard-library logger.

    Args:
        level: Logger level name (default: NOTSET, i.e. defer to the handlers)
        handlers: Names of handlers declared in the same document
        propagate: Propagate records to parent loggers (default: True)
    """

    model_config = ConfigDict(extra="ignore")

    level: str = "NOTSET"
    handlers: List[str] = Field(default_factory=list)
    propagate: bool = True


class LogConfig(BaseModel):
    """A complete logging topology.

    Handler entries stay untyped maps: each one names a registered handler
    ``class`` and the rest is passed to that handler's ``load_config``.

    Args:
        disable_existing_loggers: Disable loggers that existed before the load
            and are not configured by it (alias: disableExistingLoggers)
        formatters: Formatters to register before handlers are built
        handlers: Handler name -> {"class": <registered name>, ...}
        loggers: Logger name -> wiring

    Example:
        config = LogConfig(
            handlers={
                "console": {"class": "StreamHandler", "level": "INFO"},
                "file": {"class": "FileHandler", "filename": "logs/app.log", "level": "DEBUG"},
            },
            loggers={"app": {"level": "DEBUG", "handlers": ["console", "file"]}},
        )
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    disable_existing_loggers: bool = Field(default=False, alias="disableExistingLoggers")
    formatters: Dict[str, FormatterConfig] = Field(default_factory=dict)
    handlers: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    loggers: Dict[str, LoggerConfig] = Field(default_factory=dict)
