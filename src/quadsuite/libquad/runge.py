"""
Runge-rule error estimate for two refinement levels of the same rule.

If a rule's truncation error scales as h**k, comparing the results at
N and 2N splits gives

    err(2N) ~ (I(2N) - I(N)) / (2**k - 1)
"""

from .methods import Method, Rectangle, Simpson, Trapezoid, unknownMethod


def asymptoticOrder(method: Method) -> int:
    """Exponent k in err ~ h**k: 2 for rectangle and trapezoid, 4 for Simpson."""
    if isinstance(method, (Rectangle, Trapezoid)):
        return 2
    if isinstance(method, Simpson):
        return 4
    raise unknownMethod(method)


def rungeRule(fine: float, coarse: float, method: Method) -> float:
    """
    Signed error estimate of *fine* (2N splits) given *coarse* (N splits).

    Parameters
    ----------
    fine : float
        Result with the doubled split count.
    coarse : float
        Result with the base split count.
    method : Method
        Selects the asymptotic order.

    Returns
    -------
    float
        ``(fine - coarse) / (2**k - 1)``
    """
    k = asymptoticOrder(method)
    return (fine - coarse) / (2.0 ** k - 1.0)
