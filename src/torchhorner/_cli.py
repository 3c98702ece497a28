import argparse
import logging
import sys
from typing import List, Optional

from torchhorner.polynomial import horner_unrolled

DEFAULT_POINT = 2.0

COEFFICIENTS = (5.5, 6.6, 2.718, 7.7, 8.8, 9.9, 11.1)

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="torchhorner",
        description=(
            "Evaluate the polynomial "
            + " + ".join(
                f"{c}*x^{i}" if i else f"{c}"
                for i, c in enumerate(COEFFICIENTS)
            )
            + " at x by Horner's rule."
        ),
    )
    arg_parser.add_argument(
        "x",
        nargs="?",
        help=f"Evaluation point, defaults to {DEFAULT_POINT}",
    )
    return arg_parser


def _parse_point(value: Optional[str]) -> float:
    if value is None:
        return DEFAULT_POINT

    try:
        return float(value.strip())
    except ValueError:
        logger.warning(
            "Could not parse %r as a number, using %s", value, DEFAULT_POINT
        )
        return DEFAULT_POINT


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(
        format="%(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )

    if argv is None:
        argv = sys.argv[1:]

    # Only -h is an option. Anything else, "-abc" included, is left for the
    # point parser, and only the first token is the point.
    _build_arg_parser().parse_known_args(argv)

    if len(argv) > 1:
        logger.warning("Ignoring extra arguments: %s", " ".join(argv[1:]))

    x = _parse_point(argv[0] if argv else None)

    evaluate = horner_unrolled(len(COEFFICIENTS))

    print(evaluate(x, *COEFFICIENTS))
