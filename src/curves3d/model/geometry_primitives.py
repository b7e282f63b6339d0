"""
Geometric Primitives for curve evaluation.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union
import math

from curves3d.config import DISPLAY_PRECISION
from curves3d.exceptions import ConstructionError


@dataclass(frozen=True)
class Vector3:
    """
    An immutable triple (x, y, z) in 3D space.

    Used both as a point (curve origin, evaluated position) and as a direction
    (curve derivative). Components keep full precision; only the display form
    is rounded.
    """
    x: float
    y: float
    z: float = 0.0

    def __str__(self) -> str:
        return self.to_display_string()

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    def to_display_string(self, precision: int = DISPLAY_PRECISION) -> str:
        """
        Format as ``{x,y,z}`` with every component in fixed-point notation.

        Args:
            precision: Number of decimals per component.

        Returns:
            e.g. ``"{1.00,-2.00,0.00}"`` for ``Vector3(1.005, -2, 0)``.
        """
        return f"{{{self.x:.{precision}f},{self.y:.{precision}f},{self.z:.{precision}f}}}"


# Anything accepted where an anchor point is expected
VectorLike = Union[Vector3, Sequence[float]]


def as_vector3(value: VectorLike) -> Vector3:
    """
    Convert a curve anchor to a Vector3.

    A 2D anchor ``(x, y)`` lies in the z = 0 plane.

    Raises:
        ConstructionError: If the sequence does not have 2 or 3 components.
    """
    if isinstance(value, Vector3):
        return value

    components = [float(c) for c in value]
    if len(components) == 2:
        return Vector3(components[0], components[1], 0.0)
    if len(components) == 3:
        return Vector3(*components)
    raise ConstructionError(f"Expected a 2D or 3D anchor, got {len(components)} components.")
