import logging
import os
from typing import IO, Optional

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)


def get_level() -> str:
    """Get the level for proplist records from `PROPLIST_LOGGING_LEVEL`."""
    return os.getenv("PROPLIST_LOGGING_LEVEL", "WARNING")


def configure_logger(
    level: Optional[str] = None,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """Send proplist log records to `stream` (stderr by default).

    The library never calls this itself. Applications which want the debug
    records emitted when a strict lookup or a pair transform fails may opt in
    here; the returned handler can be removed again with `removeHandler`."""
    level = level or get_level()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level)
    logger = logging.getLogger("proplist")
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler
