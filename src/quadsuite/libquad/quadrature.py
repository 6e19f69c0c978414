"""
Composite quadrature rules on a uniform grid.

Implements:
    - Rectangle rule, left / center / right sampling (rectangle)
    - Trapezoid rule (trapezoid)
    - Simpson's rule, even split count only (simpson)
    - Method dispatcher (computeIntegral)

Sample points are built with NumPy and the integrand is evaluated once
per rule call on the whole grid (point by point if it only accepts
scalars); the weighted sums run in numba-compiled kernels that
accumulate strictly left to right.
"""

import warnings
from dataclasses import dataclass
from typing import Callable

import numpy as np
from numba import njit

from .logger import get_logger
from .methods import Method, Rectangle, RectangleMode, Simpson, Trapezoid, methodName, unknownMethod
from .nrutils import arth, assertTrue, dp, stepLength

log = get_logger(__name__)

Function = Callable[[float], float]


@dataclass(frozen=True)
class Interval:
    """Integration bounds; ``start > end`` is allowed (signed step)."""

    start: float
    end: float


@dataclass(frozen=True)
class Config:
    """Interval plus split count for a single rule evaluation."""

    interval: Interval
    nsplits: int


# ═════════════════════════════════════════════════════════════════════
#  Integrand sampling
# ═════════════════════════════════════════════════════════════════════

def _sample(function, x):
    """
    Evaluate *function* on *x*.

    Array-aware integrands are called once on the whole grid; scalar
    results are broadcast to ``x.shape``.  Integrands that only take a
    real number (``math.sin``, ``if``-based piecewise lambdas) are
    evaluated point by point through ``np.vectorize``.
    """
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            y = np.asarray(function(x), dtype=dp)
    except (TypeError, ValueError, DeprecationWarning):
        y = None

    if y is None or (y.ndim != 0 and y.shape != x.shape):
        log.debug3("integrand is not array-aware; sampling %d points one by one", x.size)
        y = np.vectorize(function, otypes=[dp])(x)
    return np.ascontiguousarray(np.broadcast_to(y, x.shape))


def _endpoints(function, interval):
    y = _sample(function, np.array([interval.start, interval.end], dtype=dp))
    return float(y[0]), float(y[1])


# ═════════════════════════════════════════════════════════════════════
#  Summation kernels
# ═════════════════════════════════════════════════════════════════════

@njit(cache=True)
def _rectangle_core(heights, h):
    """Sum of rectangle areas ``heights[i] * h``."""
    total = 0.0
    for i in range(heights.size):
        total += heights[i] * h
    return total


@njit(cache=True)
def _trapezoid_core(first, last, interior, h):
    """Trapezoid weights: 1 at the ends, 2 inside."""
    inner = 0.0
    for i in range(interior.size):
        inner += interior[i]
    return h / 2.0 * (first + last + 2.0 * inner)


@njit(cache=True)
def _simpson_core(first, last, interior, h):
    """
    Simpson weights.

    ``interior[k]`` is grid point ``k + 1``: odd grid points weigh 4,
    even ones 2.
    """
    odd = 0.0
    even = 0.0
    for k in range(interior.size):
        if (k + 1) % 2 == 0:
            even += interior[k]
        else:
            odd += interior[k]
    return h / 3.0 * (first + 4.0 * odd + 2.0 * even + last)


# ═════════════════════════════════════════════════════════════════════
#  Rules
# ═════════════════════════════════════════════════════════════════════

def rectangle(config: Config, mode: RectangleMode, function: Function) -> float:
    """
    Composite rectangle rule.

    Parameters
    ----------
    config : Config
        Interval and number of splits (N >= 1).
    mode : RectangleMode
        Sample at the left bound, the center, or the right bound of
        each subinterval.
    function : callable
        Integrand, real -> real (array-aware callables are faster).

    Returns
    -------
    float
        ``h * sum(f(x_i))`` over the N sample points.
    """
    h = stepLength(config)
    left = arth(config.interval.start, h, config.nsplits)

    if mode is RectangleMode.LEFT:
        points = left
    elif mode is RectangleMode.CENTER:
        points = left + h / 2.0
    elif mode is RectangleMode.RIGHT:
        points = left + h
    else:
        raise ValueError(f"Unknown rectangle mode {mode!r}")

    return float(_rectangle_core(_sample(function, points), h))


def trapezoid(config: Config, function: Function) -> float:
    """
    Composite trapezoid rule.

    ``h/2 * (f(a) + f(b) + 2 * sum_{i=1}^{N-1} f(a + i*h))``
    """
    h = stepLength(config)
    first, last = _endpoints(function, config.interval)
    interior = _sample(function, arth(config.interval.start, h, config.nsplits)[1:])
    return float(_trapezoid_core(first, last, interior, h))


def simpson(config: Config, function: Function) -> float:
    """
    Composite Simpson rule.

    ``h/3 * (f(a) + 4 * sum_odd + 2 * sum_even + f(b))``

    The split count must be even.  An odd count is a caller bug, not a
    user error, and stops the program through ``nrerror``.
    """
    assertTrue(config.nsplits % 2 == 0, "number of splits should be even")

    h = stepLength(config)
    first, last = _endpoints(function, config.interval)
    interior = _sample(function, arth(config.interval.start, h, config.nsplits)[1:])
    return float(_simpson_core(first, last, interior, h))


def computeIntegral(
    interval: Interval,
    nsplits: int,
    method: Method,
    function: Function,
) -> float:
    """
    Evaluate the rule selected by *method* with *nsplits* subintervals.

    A fresh ``Config`` is built for every call.
    """
    config = Config(interval=interval, nsplits=nsplits)

    if isinstance(method, Rectangle):
        value = rectangle(config, method.mode, function)
    elif isinstance(method, Trapezoid):
        value = trapezoid(config, function)
    elif isinstance(method, Simpson):
        value = simpson(config, function)
    else:
        raise unknownMethod(method)

    log.debug2("%s: N=%d -> %.17g", methodName(method), nsplits, value)
    return value
