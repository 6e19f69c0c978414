"""libquad sub-package: quadrature rules, Runge estimate and adaptive driver."""

# Import modules themselves (allows: from quadsuite.libquad import driver)
from . import logger
from . import nrutils
from . import methods
from . import quadrature
from . import runge
from . import driver

from .driver import integrate
from .methods import Rectangle, RectangleMode, Simpson, Trapezoid
from .quadrature import Interval

__all__ = [
    "logger",
    "nrutils",
    "methods",
    "quadrature",
    "runge",
    "driver",
    "integrate",
    "Interval",
    "Rectangle",
    "RectangleMode",
    "Simpson",
    "Trapezoid",
]
