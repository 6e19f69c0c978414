"""
Thin wrapper around Python's ``logging`` module with quadsuite-specific
log levels for the inner refinement loop.

Usage
-----
>>> from quadsuite.libquad.logger import get_logger
>>> log = get_logger(__name__)
>>> log.info("standard message")
>>> log.debug2("per-rule detail")     # custom level
"""

import logging
import sys

# ── Custom levels (below DEBUG=10) ──────────────────────────────────────
DEBUG2 = 9
DEBUG3 = 8

logging.addLevelName(DEBUG2, "DEBUG2")
logging.addLevelName(DEBUG3, "DEBUG3")


class _QuadLogger(logging.Logger):
    """Logger subclass that adds ``debug2`` and ``debug3`` convenience methods."""

    def debug2(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG2):
            self._log(DEBUG2, msg, args, **kwargs)

    def debug3(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG3):
            self._log(DEBUG3, msg, args, **kwargs)


logging.setLoggerClass(_QuadLogger)

# ── Mapping from command-line verbosity (-v count) to Python levels ─────
VERBOSITY_LEVEL_MAP = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
    3: DEBUG2,
    4: DEBUG3,
}


def get_logger(name: str | None = None) -> _QuadLogger:
    """Return a logger under the ``quadsuite`` hierarchy.

    If *name* is a fully qualified module name (e.g.
    ``quadsuite.libquad.driver``), the logger inherits from the
    ``quadsuite`` root logger so a single ``set_level()`` call
    controls everything.
    """
    return logging.getLogger(name or "quadsuite")


def set_level(level: int | str = logging.INFO, verbosity: bool = False) -> None:
    """Set the log level for *all* quadsuite loggers at once.

    With ``verbosity=True`` an integer *level* is read as a ``-v`` count
    and looked up in ``VERBOSITY_LEVEL_MAP`` (counts above 4 saturate).
    """
    if verbosity and isinstance(level, int):
        level = VERBOSITY_LEVEL_MAP[min(max(level, 0), max(VERBOSITY_LEVEL_MAP))]
    root = logging.getLogger("quadsuite")
    root.setLevel(level)


def setup(level: int | str = logging.INFO, stream=None, verbosity: bool = False) -> None:
    """One-time setup: attach a stderr handler with the quadsuite format.

    Extra calls only adjust the level.
    """
    root = logging.getLogger("quadsuite")
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)-7s: %(message)s"))
        root.addHandler(handler)
    set_level(level, verbosity=verbosity)
