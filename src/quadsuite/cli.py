"""
Command-line and interactive front end.

Builds a validated ``IntegrationRequest`` (from flags, a parameter
file, or interactive prompts), runs the adaptive driver and prints the
result.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from scipy import integrate as spi

from .catalog import FUNCTIONS, exactIntegral, getFunction
from .libquad import logger
from .libquad.driver import integrate
from .libquad.methods import (
    METHOD_NAMES,
    Rectangle,
    RectangleMode,
    Simpson,
    Trapezoid,
    methodFromName,
)
from .typerequest import (
    DEFAULTS,
    IntegrationRequest,
    ReadRequestParams,
    WriteRequestParams,
    checkEps,
    checkRequest,
    checkSplits,
    dumprequest,
)

log = logger.get_logger(__name__)

Prompt = Callable[[str], str]


# ═════════════════════════════════════════════════════════════════════
#  Interactive prompts
# ═════════════════════════════════════════════════════════════════════

def promptChoice(title: str, options: Sequence[str], ask: Prompt = input) -> int:
    """Show a numbered menu and return the 0-based index picked."""
    while True:
        print(title)
        for i, option in enumerate(options, start=1):
            print(f"  {i}) {option}")
        answer = ask("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return int(answer) - 1
        print(f"Please enter a number between 1 and {len(options)}")


def promptValue(text, default, convert, check=None, ask: Prompt = input):
    """Ask for a value, falling back to *default* on empty input; re-ask on errors."""
    while True:
        answer = ask(f"{text} ({default}): ").strip()
        try:
            value = convert(answer) if answer else default
            if check is not None:
                check(value)
        except ValueError as exc:
            print(exc)
            continue
        return value


def promptMethod(ask: Prompt = input):
    index = promptChoice(
        "Select method",
        ["Rectangle (Central, right, left)", "Trapezoid", "Simpson"],
        ask=ask,
    )
    if index == 1:
        return Trapezoid()
    if index == 2:
        return Simpson()

    modes = [RectangleMode.RIGHT, RectangleMode.CENTER, RectangleMode.LEFT]
    mode = promptChoice("Select rectangle method mode", ["Right", "Central", "Left"], ask=ask)
    return Rectangle(modes[mode])


def promptRequest(ask: Prompt = input) -> IntegrationRequest:
    """Collect a full request interactively."""
    keys = list(FUNCTIONS)
    function = keys[promptChoice("Select function", [FUNCTIONS[k].label for k in keys], ask=ask)]
    method = promptMethod(ask=ask)

    start = promptValue("Compute integral from", DEFAULTS["start"], float, ask=ask)
    end = promptValue("Compute integral to", DEFAULTS["end"], float, ask=ask)
    eps = promptValue("Epsilon (allowed divergence)", DEFAULTS["eps"], float,
                      check=checkEps, ask=ask)
    nsplits = promptValue("Initial number of splits", DEFAULTS["nsplits"], int,
                          check=lambda n: checkSplits(n, method), ask=ask)

    return IntegrationRequest(function=function, method=method, start=start,
                              end=end, eps=eps, nsplits=nsplits)


# ═════════════════════════════════════════════════════════════════════
#  Command line
# ═════════════════════════════════════════════════════════════════════

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Adaptive numerical integration (rectangle, trapezoid, Simpson) "
                    "with Runge-rule error control.",
    )
    ap.add_argument("--function", choices=list(FUNCTIONS), help="Integrand (catalog key).")
    ap.add_argument("--method", choices=METHOD_NAMES, help="Integration method.")
    ap.add_argument("--start", type=float, help="Lower bound (default: 0).")
    ap.add_argument("--end", type=float, help="Upper bound (default: 1).")
    ap.add_argument("--eps", type=float, help="Allowed divergence (default: 0.001).")
    ap.add_argument("--nsplits", type=int,
                    help="Initial number of splits (default: 5; must be even for simpson).")
    ap.add_argument("--params", default="", help="Read the request from a parameter file.")
    ap.add_argument("--write-params", default="", help="Write the request to a parameter file.")
    ap.add_argument("--reference", action="store_true",
                    help="Also print the analytic value and scipy.integrate.quad's value.")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity.")
    return ap.parse_args(argv)


_REQUEST_FLAGS = ("function", "method", "start", "end", "eps", "nsplits")


def _flagOrDefault(args, name):
    value = getattr(args, name)
    return DEFAULTS[name] if value is None else value


def buildRequest(args: argparse.Namespace, ask: Prompt = input) -> IntegrationRequest:
    """Turn parsed arguments into a validated request (prompting if needed)."""
    if args.params:
        given = [f"--{name}" for name in _REQUEST_FLAGS if getattr(args, name) is not None]
        if given:
            raise ValueError(f"--params cannot be combined with {', '.join(given)}")
        return ReadRequestParams(args.params)

    if args.function is None and args.method is None:
        request = promptRequest(ask=ask)
    else:
        if args.function is None or args.method is None:
            raise ValueError("--function and --method must be given together")
        request = IntegrationRequest(
            function=args.function,
            method=methodFromName(args.method),
            start=_flagOrDefault(args, "start"),
            end=_flagOrDefault(args, "end"),
            eps=_flagOrDefault(args, "eps"),
            nsplits=_flagOrDefault(args, "nsplits"),
        )
    checkRequest(request)
    dumprequest(request)
    return request


def solve(request: IntegrationRequest) -> tuple[float, int]:
    """Run the adaptive driver on a validated request."""
    entry = getFunction(request.function)
    return integrate(entry.function, request.interval, request.nsplits,
                     request.eps, request.method)


def main(argv: list[str] | None = None, ask: Prompt = input) -> int:
    args = _parse_args(argv)
    logger.setup(args.verbose, verbosity=True)

    try:
        request = buildRequest(args, ask=ask)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt) as exc:
        print(f"Error: input aborted ({type(exc).__name__})", file=sys.stderr)
        return 2

    if args.write_params:
        WriteRequestParams(args.write_params, request)
        log.info("request written to %s", args.write_params)

    try:
        value, nsplits = solve(request)
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Integral: {value}")
    print(f"Number of splits used: {nsplits}")

    if args.reference:
        exact = exactIntegral(request.function, request.start, request.end)
        quad, quad_err = spi.quad(getFunction(request.function).function,
                                  request.start, request.end)
        print(f"Analytic value: {exact}")
        print(f"Result from scipy = {quad} (+/- {quad_err:.1e})")
        print(f"Absolute error: {abs(value - exact):.3e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
