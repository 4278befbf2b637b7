"""
Command line front end: fit a polynomial to number lists given as arguments.

    polyfit --x "-1 0 1 2 3 5 7 9" --y "-1 3 2.5 5 4 2 5 4" --degree 6
    polyfit --x "..." --y "..." --best 10 --target 0.95 --latex
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Optional, Sequence

import numpy as np

from polyfit.exceptions import ConfigurationError
from polyfit.fitting import FitResult, FitSettings, Polyfit

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(module)s:%(lineno)d - %(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_number_list(text: str) -> list[float]:
    return [float(t) for t in re.split(r"[\s,;]+", text.strip()) if t] if text else []


def configure_logging(verbose: bool) -> None:
    root = logging.getLogger("polyfit")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyfit",
        description="Least-squares polynomial fit of y over x.")
    parser.add_argument("--x", required=True, help="x values separated by spaces, commas or semicolons")
    parser.add_argument("--y", required=True, help="y values, same count as --x")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--degree", type=int, default=None, help="fit exactly this degree")
    mode.add_argument("--best", type=int, default=None, metavar="MAX",
                      help="lowest degree up to MAX whose correlation exceeds --target")
    parser.add_argument("--target", type=float, default=0.9, help="correlation threshold for --best")

    storage = parser.add_mutually_exclusive_group()
    storage.add_argument("--float32", action="store_true", help="store samples as float32")
    storage.add_argument("--float64", action="store_true", help="store samples as float64")

    parser.add_argument("--latex", action="store_true", help="also print the polynomial as LaTeX")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _samples(args: argparse.Namespace) -> tuple[object, object]:
    x = parse_number_list(args.x)
    y = parse_number_list(args.y)
    if args.float32:
        return np.asarray(x, dtype=np.float32), np.asarray(y, dtype=np.float32)
    if args.float64:
        return np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)
    return x, y


def _report(pf: Polyfit, result: FitResult, latex: bool) -> None:
    print(f"degree: {result.degree}")
    print(f"expression: {result.expression}")
    print(f"correlation: {result.correlation!r}")
    print(f"standard error: {result.standard_error!r}")
    if latex:
        print(f"latex: {pf.to_latex(result.degree)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        x, y = _samples(args)
        pf = Polyfit(x, y, FitSettings(target_correlation=args.target))
        if args.best is not None:
            result = pf.best_fit(args.best)
            if result is None:
                print(f"no degree up to {args.best} exceeds correlation {args.target}")
                return 1
        else:
            result = pf.fit(args.degree if args.degree is not None else 1)
    except (ConfigurationError, ValueError) as exc:
        logger.debug("rejected input", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    _report(pf, result, args.latex)
    return 0


if __name__ == "__main__":
    sys.exit(main())
