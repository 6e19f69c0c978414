"""
Adaptive quadrature driver.

Evaluates a rule at N and 2N splits, estimates the error of the 2N
result with the Runge rule and stops once it drops below ``eps``.
After a failed iteration the next base count is 4N (the doubled count,
doubled again).
"""

from typing import Tuple

from .logger import get_logger
from .methods import Method, methodName
from .quadrature import Function, Interval, computeIntegral
from .runge import rungeRule

log = get_logger(__name__)

# ─── Module constants ────────────────────────────────────────────────
MAXITER = 100_000
MAXSPLITS = 1 << 24


def _iterationsExceeded(maxiter, nsplits):
    msg = (
        "Number of iterations to reach prompted precision exceeds maximum iterations!\n"
        f"Max iterations: {maxiter}; number of splits reached: {nsplits}\n"
        "Try to specify higher initial number of splits or lower precision"
    )
    log.error(msg)
    return RuntimeError(msg)


def _splitsExceeded(maxsplits, nsplits, niter):
    msg = (
        "Number of splits to reach prompted precision exceeds maximum splits!\n"
        f"Max splits: {maxsplits}; number of splits reached: {nsplits} "
        f"after {niter} iterations\n"
        "Try to specify higher initial number of splits or lower precision"
    )
    log.error(msg)
    return RuntimeError(msg)


def integrate(
    function: Function,
    interval: Interval,
    nsplits: int,
    eps: float,
    method: Method,
    maxiter: int = MAXITER,
    maxsplits: int = MAXSPLITS,
) -> Tuple[float, int]:
    """
    Integrate *function* over *interval* to tolerance *eps*.

    Parameters
    ----------
    function : callable(float) -> float
        Integrand; array-aware callables are evaluated on the whole grid.
    interval : Interval
        Integration bounds (may be reversed).
    nsplits : int
        Initial split count, >= 1 and even for Simpson.  Validated by
        the caller (see ``quadsuite.typerequest.checkRequest``).
    eps : float
        Tolerance on ``|rungeRule(fine, coarse)|``, > 0.
    method : Method
        Rule to apply.
    maxiter : int
        Iteration budget.
    maxsplits : int
        Largest split count a rule may be evaluated with.  Hitting it
        is treated exactly like running out of iterations.

    Returns
    -------
    value : float
        Integral computed with the doubled split count of the last
        iteration.
    nsplits : int
        That doubled split count.

    Raises
    ------
    RuntimeError
        If neither budget is enough to converge.
    """
    log.debug("integrate: method=%s, interval=[%g, %g], nsplits=%d, eps=%g",
              methodName(method), interval.start, interval.end, nsplits, eps)

    for niter in range(1, maxiter + 1):
        doubled = nsplits * 2
        if doubled > maxsplits:
            raise _splitsExceeded(maxsplits, nsplits, niter - 1)

        integral = computeIntegral(interval, nsplits, method, function)
        refined = computeIntegral(interval, doubled, method, function)
        divergence = rungeRule(refined, integral, method)

        log.debug("iteration %d: N=%d I(N)=%.17g I(2N)=%.17g divergence=%.3e",
                  niter, nsplits, integral, refined, divergence)

        if abs(divergence) < eps:
            log.info("converged after %d iteration(s) with %d splits", niter, doubled)
            return refined, doubled

        nsplits = doubled * 2

    raise _iterationsExceeded(maxiter, nsplits)
