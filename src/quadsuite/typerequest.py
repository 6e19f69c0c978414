"""
Integration request structure.

This module provides the validated request handed to the adaptive
driver, together with functions for checking, reading, writing and
dumping it.  Parameter files hold one value per line, optionally
followed by a comment:

         sin : Integrand (catalog key).
     simpson : Integration method.
      0.0E+00 : Lower integration bound.
      ...
"""

from dataclasses import dataclass, field

from .catalog import FUNCTIONS, getFunction
from .libquad.logger import get_logger
from .libquad.methods import Method, Rectangle, methodFromName, methodName, requiresEvenSplits
from .libquad.quadrature import Interval

log = get_logger(__name__)

DEFAULTS = {
    "start": 0.0,
    "end": 1.0,
    "eps": 0.001,
    "nsplits": 5,
}


@dataclass
class IntegrationRequest:
    """
    Everything the driver needs for one computation.

    Attributes
    ----------
    function : str
        Catalog key of the integrand.
    method : Method
        Quadrature rule.
    start, end : float
        Integration bounds.
    eps : float
        Tolerance on the Runge error estimate (> 0).
    nsplits : int
        Initial split count (>= 1, even for Simpson).
    """
    function: str
    method: Method = field(default_factory=Rectangle)
    start: float = DEFAULTS["start"]
    end: float = DEFAULTS["end"]
    eps: float = DEFAULTS["eps"]
    nsplits: int = DEFAULTS["nsplits"]

    @property
    def interval(self) -> Interval:
        return Interval(self.start, self.end)


def checkEps(eps: float) -> float:
    if not eps > 0.0:
        raise ValueError(f"Should be strictly above zero! Got {eps}")
    return eps


def checkSplits(nsplits: int, method: Method) -> int:
    if nsplits < 1:
        raise ValueError(f"Number of splits should be positive! Got {nsplits}")
    if requiresEvenSplits(method) and nsplits % 2 == 1:
        raise ValueError(f"Number {nsplits} is odd number! Should be even!")
    return nsplits


def checkRequest(request: IntegrationRequest) -> IntegrationRequest:
    """
    Validate *request* before it reaches the driver.

    Raises
    ------
    ValueError
        Unknown function, non-positive tolerance, non-positive split
        count, or an odd split count for Simpson's rule.
    """
    getFunction(request.function)
    methodName(request.method)
    checkEps(request.eps)
    checkSplits(request.nsplits, request.method)
    return request


# ═════════════════════════════════════════════════════════════════════
#  Parameter file I/O
# ═════════════════════════════════════════════════════════════════════

def GetFileToken(file_handle):
    """
    Read the first whitespace-separated token of the next line.

    Anything after it (usually ``: comment``) is ignored.
    """
    line = file_handle.readline()
    if not line:
        raise ValueError("Unexpected end of file while reading parameter")
    parts = line.split()
    if not parts:
        raise ValueError(f"Empty line in parameter file: {line!r}")
    return parts[0]


def GetFileParam(file_handle):
    """Read a numeric parameter from the next line."""
    token = GetFileToken(file_handle)
    try:
        return float(token)
    except ValueError as exc:
        raise ValueError(f"Could not parse parameter value: {token}") from exc


def GetFileInt(file_handle):
    """Read an integer parameter from the next line."""
    token = GetFileToken(file_handle)
    try:
        return int(token)
    except ValueError as exc:
        raise ValueError(f"Could not parse integer parameter value: {token}") from exc


def readrequestparams_sub(file_handle):
    """Read a request from an open file handle (see module docstring for layout)."""
    function = GetFileToken(file_handle)
    method = methodFromName(GetFileToken(file_handle))
    start = GetFileParam(file_handle)
    end = GetFileParam(file_handle)
    eps = GetFileParam(file_handle)
    nsplits = GetFileInt(file_handle)
    return IntegrationRequest(function=function, method=method, start=start,
                              end=end, eps=eps, nsplits=nsplits)


def ReadRequestParams(filename):
    """
    Read and validate a request from a parameter file.

    Parameters
    ----------
    filename : str or Path

    Returns
    -------
    IntegrationRequest
    """
    with open(filename, 'r', encoding='utf-8') as f:
        request = readrequestparams_sub(f)
    checkRequest(request)
    dumprequest(request)
    return request


def WriteRequestParams_sub(file_handle, request):
    """Write *request* to an open file handle, one commented value per line."""
    file_handle.write(f"{request.function:>25} : Integrand (catalog key).\n")
    file_handle.write(f"{methodName(request.method):>25} : Integration method.\n")
    file_handle.write(f"{request.start:25.15E} : Lower integration bound.\n")
    file_handle.write(f"{request.end:25.15E} : Upper integration bound.\n")
    file_handle.write(f"{request.eps:25.15E} : Epsilon (allowed divergence).\n")
    file_handle.write(f"{request.nsplits:25d} : Initial number of splits.\n")


def WriteRequestParams(filename, request):
    with open(filename, 'w', encoding='utf-8') as f:
        WriteRequestParams_sub(f, request)


def dumprequest(request):
    """Log the request parameters at INFO level."""
    label = FUNCTIONS[request.function].label if request.function in FUNCTIONS else "?"
    log.info("Integrand:        %s (%s)", request.function, label)
    log.info("Method:           %s", methodName(request.method))
    log.info("Interval:         [%g, %g]", request.start, request.end)
    log.info("Epsilon:          %g", request.eps)
    log.info("Initial splits:   %d", request.nsplits)
