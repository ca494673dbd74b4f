"""Process-wide logger for todo-txt.

The package logger is created on first use. Applications that want the
library's messages somewhere specific can either hand in their own logger
with ``set_logger`` or call ``configure_logging`` once at startup.
"""

import logging
from typing import Optional, Union

from rich.logging import RichHandler

LOGGER_NAME = "todo_txt"

_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the shared logger, creating it on first call."""
    global _logger
    if _logger is None:
        _logger = logging.getLogger(LOGGER_NAME)
    return _logger


def set_logger(new_logger: Optional[logging.Logger]) -> None:
    """Replace the shared logger; ``None`` resets to the default on next use."""
    global _logger
    _logger = new_logger


def configure_logging(
    level: Union[str, int, None] = None, rich_output: bool = True
) -> logging.Logger:
    """Attach a console handler to the shared logger.

    Args:
        level: Log level name or number. Defaults to ``log_level`` from the
            loaded configuration.
        rich_output: Render records with rich; plain ``StreamHandler`` otherwise

    Returns:
        The configured logger
    """
    if level is None:
        from .config import get_config
        level = get_config().log_level

    if isinstance(level, str):
        level = level.upper()

    log = get_logger()
    log.setLevel(level)

    for handler in list(log.handlers):
        if getattr(handler, "_todo_txt_handler", False):
            log.removeHandler(handler)

    if rich_output:
        handler = RichHandler(show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handler._todo_txt_handler = True
    log.addHandler(handler)
    return log


class LoggerMixin:
    """Gives instances a ``logger`` property backed by the shared logger."""

    @property
    def logger(self) -> logging.Logger:
        return get_logger()
