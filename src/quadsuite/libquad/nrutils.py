"""
Numerical utilities shared by the quadrature rules.

Range and step helpers, arithmetic progressions for sample points, and
the fatal-error / assertion routines used for programming-error
preconditions.
"""

import sys
from typing import Any, Optional

import numpy as np

# ---------------------------------------------------------------------------
# Kind-parameter alias
# ---------------------------------------------------------------------------
dp = np.float64


# ===================================================================
#  Assertion / error utilities
# ===================================================================

def nrerror(msg: str) -> None:
    """
    Report a fatal error and stop.

    Parameters
    ----------
    msg : str
        Error message printed to stderr.

    Raises
    ------
    SystemExit
    """
    print(f"nrerror: {msg}", file=sys.stderr)
    raise SystemExit(msg)


def assertTrue(
    test: bool,
    msg: str = "Assertion failed",
    file: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """
    Assert *test* is ``True``; call ``nrerror`` on failure.

    Parameters
    ----------
    test : bool
    msg : str
    file, line : optional
        Source location for diagnostics.
    """
    if not test:
        loc = f"{file}:{line} : " if file is not None and line is not None else ""
        nrerror(f"{loc}{msg}")


# ===================================================================
#  Progressions
# ===================================================================

def arth(first: float, increment: float, n: int) -> np.ndarray:
    """
    Arithmetic progression of length *n*.

    $a_k = \\text{first} + k \\cdot \\text{increment},\\quad k = 0, \\dots, n-1$

    Parameters
    ----------
    first : float
        Starting value.
    increment : float
        Common difference.
    n : int
        Length.

    Returns
    -------
    ndarray of float64
    """
    return first + np.arange(n, dtype=dp) * increment


# ===================================================================
#  Range / step
# ===================================================================

def rangeLength(start: float, end: float) -> float:
    """
    Signed length of the interval ``[start, end]``.

    Negative for a reversed interval; no ordering is enforced.
    """
    return end - start


def stepLength(config: Any) -> float:
    """
    Uniform step ``h = (end - start) / nsplits`` for a rule configuration.

    Parameters
    ----------
    config : Config
        Anything exposing ``interval.start``, ``interval.end`` and
        ``nsplits``.

    Returns
    -------
    float
        Signed step length.

    Notes
    -----
    ``nsplits`` is not validated; zero raises ``ZeroDivisionError``.
    """
    length = rangeLength(config.interval.start, config.interval.end)
    return float(length) / config.nsplits
