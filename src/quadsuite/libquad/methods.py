"""
Integration method variants.

A method is one of ``Rectangle(mode)``, ``Trapezoid()`` or ``Simpson()``.
Consumers dispatch on the concrete class and raise ``TypeError`` for
anything else, so a new variant fails loudly at every dispatch site
until it is handled there.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RectangleMode(Enum):
    """Sample point inside each subinterval."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Rectangle:
    mode: RectangleMode = RectangleMode.CENTER


@dataclass(frozen=True)
class Trapezoid:
    pass


@dataclass(frozen=True)
class Simpson:
    pass


Method = Union[Rectangle, Trapezoid, Simpson]


def unknownMethod(method) -> TypeError:
    """Build the error raised by dispatch sites for an unhandled variant."""
    return TypeError(f"Unknown integration method {method!r}")


def requiresEvenSplits(method: Method) -> bool:
    """True if the method's rule only accepts an even split count."""
    if isinstance(method, Simpson):
        return True
    if isinstance(method, (Rectangle, Trapezoid)):
        return False
    raise unknownMethod(method)


def methodName(method: Method) -> str:
    """Stable name used on the command line and in parameter files."""
    if isinstance(method, Rectangle):
        return f"rectangle-{method.mode.value}"
    if isinstance(method, Trapezoid):
        return "trapezoid"
    if isinstance(method, Simpson):
        return "simpson"
    raise unknownMethod(method)


METHOD_NAMES = (
    "rectangle-left",
    "rectangle-center",
    "rectangle-right",
    "trapezoid",
    "simpson",
)


def methodFromName(name: str) -> Method:
    """
    Parse a method name produced by ``methodName``.

    Raises
    ------
    ValueError
        If *name* is not one of ``METHOD_NAMES``.
    """
    key = name.strip().lower()
    if key == "trapezoid":
        return Trapezoid()
    if key == "simpson":
        return Simpson()
    mode = key[len("rectangle-"):] if key.startswith("rectangle-") else None
    if mode in {m.value for m in RectangleMode}:
        return Rectangle(RectangleMode(mode))
    raise ValueError(
        f"Unknown method '{name}'. Expected one of: {', '.join(METHOD_NAMES)}"
    )
