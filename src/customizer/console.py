"""Console presentation of log records."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

__all__ = ["ConsoleHandler", "configure_logging"]


_LOGGER_NAME = "customizer"

_STYLES = {
    logging.DEBUG: ("  ", "dim"),
    logging.INFO: ("👉", "green"),
    logging.WARNING: ("🐓", "yellow"),
    logging.ERROR: ("💥", "red"),
}


class ConsoleHandler(logging.Handler):
    """Print records through a ``rich`` console with a level marker and colour."""

    def __init__(self, console: Console | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.console = console or Console(stderr=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = max((lvl for lvl in _STYLES if lvl <= record.levelno), default=logging.DEBUG)
            marker, style = _STYLES[level]
            message = escape(self.format(record))
            self.console.print(
                f"{marker} [{style}]{message}[/{style}]",
                highlight=False,
                soft_wrap=True,
            )
        except Exception:
            self.handleError(record)


def configure_logging(*, verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Route customizer log records to the console."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = ConsoleHandler(console, level=level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
