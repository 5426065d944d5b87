"""Short-hand log helpers on the shared "mixtape" logger.

Each helper prefixes a marker so import and link steps are easy to spot in
the server output. Arguments are passed through for lazy %-formatting.
"""

import logging
from typing import Any

logger = logging.getLogger("mixtape")


def _emit(level: int, marker: str, message: str, args: tuple, exc_info: bool = False) -> None:
    if marker:
        message = f"{marker} {message}"
    logger.log(level, message, *args, exc_info=exc_info)


def log_info(message: str, *args: Any) -> None:
    _emit(logging.INFO, "", message, args)


def log_step(message: str, *args: Any) -> None:
    _emit(logging.INFO, "→", message, args)


def log_success(message: str, *args: Any) -> None:
    _emit(logging.INFO, "✅", message, args)


def log_warning(message: str, *args: Any) -> None:
    _emit(logging.WARNING, "⚠️", message, args)


def log_error(message: str, *args: Any, exc_info: bool = False) -> None:
    """Error line; pass exc_info=True from an except block to keep the traceback."""
    _emit(logging.ERROR, "❌", message, args, exc_info=exc_info)
