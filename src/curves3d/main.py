"""
Console Demonstration
=====================
Generates a random collection of curves, evaluates every curve at one angle
and reports statistics about the circles in the collection.

Usage:
    $ python -m curves3d --seed 42
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from curves3d.config import DEFAULT_ANGLE, DEFAULT_CURVE_COUNT
from curves3d.exceptions import EmptyCollectionError
from curves3d.logging_config import setup_logging
from curves3d.model.collection import CurveCollection
from curves3d.model.generation import generate_curves

logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type for counts."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curves3d",
        description="Evaluate a random collection of ellipses, circles and helices.",
    )
    parser.add_argument("--count", type=non_negative_int, default=DEFAULT_CURVE_COUNT, help="number of curves to generate")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible samples")
    parser.add_argument("--angle", type=float, default=DEFAULT_ANGLE, help="evaluation angle in radians")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument("--plot", action="store_true", help="show a 3D preview of the curves")
    return parser


def report(collection: CurveCollection, angle: float, out: TextIO) -> None:
    """
    Print points, derivatives and circle statistics.

    Raises:
        EmptyCollectionError: If the collection holds no circle.
    """
    for evaluation in collection.evaluate(angle):
        print(f"Point: {evaluation.point}", file=out)
        print(f"Derivative: {evaluation.derivative}", file=out)

    first = collection.smallest_circle()
    last = collection.largest_circle()
    print(f"first: {first.radius:g}, last: {last.radius:g}", file=out)
    print(f"Total Sum of Radii: {collection.total_radius():g}", file=out)


def main(argv: Optional[Sequence[str]] = None, out: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout
    setup_logging(level=args.log_level, log_file=args.log_file)

    collection = generate_curves(count=args.count, seed=args.seed)
    logger.info(f"Curve kinds: {collection.count_by_kind()}")

    try:
        report(collection, args.angle, out)
    except EmptyCollectionError as e:
        logger.error(f"Cannot report circle statistics: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.plot:
        # matplotlib is only needed for the preview
        from curves3d.view.plot import plot_curves
        plot_curves(collection)

    return 0


if __name__ == "__main__":
    sys.exit(main())
