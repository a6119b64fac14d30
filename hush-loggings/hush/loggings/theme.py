"""Terminal theme for the ``terminal`` formatter."""

from typing import Optional

from rich.style import Style
from rich.theme import Theme


# Only problems stand out; DEBUG fades into the background
LOGGING_THEME = Theme({
    "logging.level.notset": "dim",
    "logging.level.debug": "#6e7681",
    "logging.level.info": "white",
    "logging.level.warning": "#d29922",
    "logging.level.error": "#f85149",
    "logging.level.critical": "bold reverse #b81c1c",
    "log.time": "dim white",
    "log.name": "#6e7681",
})


def level_style(level_name: str, theme: Theme = LOGGING_THEME) -> Optional[Style]:
    """Return the theme style for a level name, or None if the theme has none."""
    return theme.styles.get(f"logging.level.{level_name.lower()}")
