"""
QuadSuite: adaptive one-dimensional numerical quadrature.

Rectangle, trapezoid and Simpson rules refined by doubling the split
count until the Runge-rule error estimate falls below a tolerance.
"""

# Import main sub-packages
from . import libquad
from . import catalog
from . import typerequest

from .libquad import integrate

__all__ = [
    "libquad",
    "catalog",
    "typerequest",
    "integrate",
]
