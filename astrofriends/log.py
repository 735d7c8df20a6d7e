"""Logging setup shared by the API app and the CLI."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _coerce_level(value: Union[str, int, None]) -> int:
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    candidate = value.strip()
    if not candidate:
        return logging.INFO
    if candidate.isdigit():
        return int(candidate)
    resolved = logging.getLevelName(candidate.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[Union[str, int]] = None) -> int:
    """Attach a stream handler to the ``astrofriends`` logger tree.

    ``level`` overrides ``ASTRO_LOG_LEVEL``; unknown names fall back to INFO.
    Calling this more than once does not stack handlers.
    """

    global _handler
    effective = _coerce_level(level if level is not None else os.getenv("ASTRO_LOG_LEVEL"))
    logger = logging.getLogger("astrofriends")
    logger.setLevel(effective)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return effective
