"""Random sample of curves for the console demonstration."""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from curves3d.config import DEFAULT_CURVE_COUNT, PARAMETER_HIGH, PARAMETER_LOW
from curves3d.model.collection import CurveCollection
from curves3d.model.curves import Circle, Curve, CurveKind, Ellipse, Helix

logger = logging.getLogger(__name__)

# Variant produced for index i is VARIANT_CYCLE[i % 3]
VARIANT_CYCLE: tuple[CurveKind, ...] = (CurveKind.ELLIPSE, CurveKind.CIRCLE, CurveKind.HELIX)


def _build_curve(kind: CurveKind, rng: np.random.Generator, low: int, high: int) -> Curve:
    def draw(n: int) -> list[float]:
        # integers() is half-open, parameters are inclusive of `high`
        return [float(v) for v in rng.integers(low, high + 1, size=n)]

    match kind:
        case CurveKind.ELLIPSE:
            x, y, a, b = draw(4)
            return Ellipse((x, y), a, b)
        case CurveKind.CIRCLE:
            x, y, r = draw(3)
            return Circle((x, y), r)
        case CurveKind.HELIX:
            x, y, z, r, step = draw(5)
            return Helix.circular((x, y, z), r, step)
        case _:
            raise ValueError(f"Unknown curve kind: {kind}")


def generate_curves(
    count: int = DEFAULT_CURVE_COUNT,
    seed: Optional[int] = None,
    low: int = PARAMETER_LOW,
    high: int = PARAMETER_HIGH,
) -> CurveCollection:
    """
    Generate a collection cycling through ellipse, circle and helix.

    Args:
        count: Number of curves.
        seed: Seed of the numpy Generator; the same seed gives the same collection.
        low: Smallest generated parameter (inclusive).
        high: Largest generated parameter (inclusive).

    Returns:
        CurveCollection with ``count`` curves.
    """
    if count < 0:
        raise ValueError(f"Curve count must be non-negative, got {count}.")
    if low > high:
        raise ValueError(f"Empty parameter range [{low}, {high}].")

    rng = np.random.default_rng(seed)
    collection = CurveCollection()
    for i in range(count):
        collection.add(_build_curve(VARIANT_CYCLE[i % len(VARIANT_CYCLE)], rng, low, high))

    logger.info(f"Generated {count} curves (seed={seed}).")
    return collection
