"""
Catalog of reference integrands.

Each entry maps a stable key to a display label, a vectorised integrand
and its analytic antiderivative, so results can be checked against the
exact value.
"""

from dataclasses import dataclass
from typing import Callable, Dict

import numpy as np


@dataclass(frozen=True)
class CatalogEntry:
    key: str
    label: str
    function: Callable[[np.ndarray], np.ndarray]
    primitive: Callable[[np.ndarray], np.ndarray]


def _sinSqrtPrimitive(x):
    r = np.sqrt(x)
    return 2.0 * (np.sin(r) - r * np.cos(r)) + 2.0 * x


_ENTRIES = (
    CatalogEntry(
        key="cubic-a",
        label="2x^3 - 2x^2 + 7x - 14",
        function=lambda x: 2.0 * x**3 - 2.0 * x**2 + 7.0 * x - 14.0,
        primitive=lambda x: x**4 / 2.0 - 2.0 * x**3 / 3.0 + 3.5 * x**2 - 14.0 * x,
    ),
    CatalogEntry(
        key="cubic-b",
        label="-3x^3 - 5x^2 + 4x - 2",
        function=lambda x: -3.0 * x**3 - 5.0 * x**2 + 4.0 * x - 2.0,
        primitive=lambda x: -0.75 * x**4 - 5.0 * x**3 / 3.0 + 2.0 * x**2 - 2.0 * x,
    ),
    CatalogEntry(
        key="sin",
        label="sin(x) + 1.125",
        function=lambda x: np.sin(x) + 1.125,
        primitive=lambda x: -np.cos(x) + 1.125 * x,
    ),
    CatalogEntry(
        key="sin-sqrt",
        label="sin(sqrt(x)) + 2",
        function=lambda x: np.sin(np.sqrt(x)) + 2.0,
        primitive=_sinSqrtPrimitive,
    ),
)

FUNCTIONS: Dict[str, CatalogEntry] = {entry.key: entry for entry in _ENTRIES}


def getFunction(key: str) -> CatalogEntry:
    """Look up a catalog entry; ``ValueError`` for an unknown key."""
    try:
        return FUNCTIONS[key]
    except KeyError:
        raise ValueError(
            f"Unknown function '{key}'. Expected one of: {', '.join(FUNCTIONS)}"
        ) from None


def exactIntegral(key: str, start: float, end: float) -> float:
    """Analytic value of the integral of catalog entry *key* over [start, end]."""
    entry = getFunction(key)
    return float(entry.primitive(np.float64(end)) - entry.primitive(np.float64(start)))
