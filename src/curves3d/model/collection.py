"""
Curve Collection
================
A heterogeneous set of curves owned by value, with the queries used by the
console demonstration: filtering by variant, ordering circles by radius and
aggregate statistics.

Variant queries go through ``Curve.kind``; a curve of another kind is simply
not part of the result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Iterator

from curves3d.exceptions import EmptyCollectionError
from curves3d.model.curves import Circle, Curve, CurveKind
from curves3d.model.geometry_primitives import Vector3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    """Position and tangent of one curve at one angle."""
    curve: Curve
    angle: float
    point: Vector3
    derivative: Vector3


@dataclass
class CurveCollection:
    curves: list[Curve] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.curves)

    def add(self, curve: Curve) -> None:
        self.curves.append(curve)

    def extend(self, curves: Iterable[Curve]) -> None:
        self.curves.extend(curves)

    def of_kind(self, kind: CurveKind) -> list[Curve]:
        return [curve for curve in self.curves if curve.kind is kind]

    def count_by_kind(self) -> dict[CurveKind, int]:
        counts = {kind: 0 for kind in CurveKind}
        for curve in self.curves:
            counts[curve.kind] += 1
        return counts

    def circles(self) -> list[Circle]:
        return [curve for curve in self.of_kind(CurveKind.CIRCLE) if isinstance(curve, Circle)]

    def circles_by_radius(self) -> list[Circle]:
        """Circles sorted ascending by radius (stable for equal radii)."""
        return sorted(self.circles(), key=lambda circle: circle.radius)

    def smallest_circle(self) -> Circle:
        """
        Raises:
            EmptyCollectionError: If the collection holds no circle.
        """
        return self._require_circles()[0]

    def largest_circle(self) -> Circle:
        """
        Raises:
            EmptyCollectionError: If the collection holds no circle.
        """
        return self._require_circles()[-1]

    def total_radius(self) -> float:
        """Sum of the radii of all circles; 0.0 when there are none."""
        return float(sum(circle.radius for circle in self.circles()))

    def evaluate(self, angle: float) -> list[Evaluation]:
        """
        Evaluate every curve at the same angle, in insertion order.
        """
        logger.debug(f"Evaluating {len(self.curves)} curves at angle {angle:.4f} rad.")
        return [
            Evaluation(
                curve=curve,
                angle=angle,
                point=curve.calculate(angle),
                derivative=curve.derivative(angle)
            )
            for curve in self.curves
        ]

    def _require_circles(self) -> list[Circle]:
        ordered = self.circles_by_radius()
        if not ordered:
            raise EmptyCollectionError(
                f"Collection of {len(self.curves)} curves contains no {CurveKind.CIRCLE}."
            )
        return ordered
