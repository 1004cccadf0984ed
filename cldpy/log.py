"""Loguru sink configuration for command-line use.

The library itself never adds sinks; it disables its namespace on import and
leaves the choice to the application.
"""

from __future__ import annotations

import sys
from typing import Final

from loguru import logger

LOG_FORMAT: Final[str] = "{time:HH:mm:ss} | {level: <7} | {name}:{function} | {message}"


def configure_logging(*, verbose: bool = False) -> int:
    """Replace loguru's sinks with one stderr sink and enable `cldpy` records.

    Returns the sink id so callers (and tests) can remove it again.
    """
    logger.remove()
    sink_id = logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("cldpy")
    return sink_id


__all__ = ["LOG_FORMAT", "configure_logging"]
