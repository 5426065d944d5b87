import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logging for the API process.

    - one stdout handler, one line per record
    - `level` is a number or a level name ("DEBUG", "info"); unknown names fall back to INFO
    - urllib3 connection chatter stays at WARNING, even in DEBUG

    When uvicorn has already installed handlers, only the level is applied.
    """
    level = _resolve_level(level)
    root = logging.getLogger()
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
    root.setLevel(level)
