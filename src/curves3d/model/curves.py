"""
Parametric space curves.

Every curve is a frozen value anchored at ``origin`` and evaluated at an
unbounded angle in radians. ``derivative`` is the literal d/d(angle) of
``calculate``: not normalised, not arc-length parameterised.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TYPE_CHECKING
import math

import numpy as np

from curves3d.exceptions import ConstructionError
from curves3d.model.geometry_primitives import Vector3, VectorLike, as_vector3

if TYPE_CHECKING:
    import numpy.typing as npt

TWO_PI = 2.0 * math.pi


class CurveKind(StrEnum):
    """Discriminator of the closed set of curve variants."""
    ELLIPSE = "ellipse"
    CIRCLE = "circle"
    HELIX = "helix"


def _require_finite(owner: str, **params: float) -> None:
    for name, value in params.items():
        if not math.isfinite(value):
            raise ConstructionError(f"{owner}: parameter '{name}' must be finite, got {value}.")


def _as_angles(angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.atleast_1d(np.asarray(angles, dtype=np.float64))


@dataclass(frozen=True)
class Curve(ABC):
    """
    Abstract base class for parametric space curves.
    """
    kind: ClassVar[CurveKind]

    origin: Vector3

    def __post_init__(self) -> None:
        # Frozen: normalise a 2D/3D sequence anchor in place
        object.__setattr__(self, "origin", as_vector3(self.origin))
        if not self.origin.is_finite():
            raise ConstructionError(f"{type(self).__name__}: origin must be finite, got {self.origin}.")

    @abstractmethod
    def calculate(self, angle: float) -> Vector3:
        """
        Get the point on the curve.

        Args:
            angle: Curve parameter in radians.

        Returns:
            Position at ``angle``.
        """
        pass

    @abstractmethod
    def derivative(self, angle: float) -> Vector3:
        """
        Get the tangent of the curve, d calculate / d angle.

        Args:
            angle: Curve parameter in radians.

        Returns:
            Derivative at ``angle``.
        """
        pass

    @abstractmethod
    def sample(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        """
        Evaluate positions at many angles at once.

        Returns:
            An array of shape (n, 3), one row per angle.
        """
        pass

    @abstractmethod
    def sample_derivative(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Vectorised ``derivative``, shape (n, 3)."""
        pass


@dataclass(frozen=True)
class Ellipse(Curve):
    """
    Planar ellipse with semi-axes ``a`` (along X) and ``b`` (along Y),
    lying in the plane z = origin.z.
    """
    kind: ClassVar[CurveKind] = CurveKind.ELLIPSE

    a: float
    b: float

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_finite(type(self).__name__, a=self.a, b=self.b)

    @property
    def is_circular(self) -> bool:
        return self.a == self.b

    def calculate(self, angle: float) -> Vector3:
        return Vector3(
            self.origin.x + self.a * math.cos(angle),
            self.origin.y + self.b * math.sin(angle),
            self.origin.z
        )

    def derivative(self, angle: float) -> Vector3:
        return Vector3(
            -self.a * math.sin(angle),
            self.b * math.cos(angle),
            0.0
        )

    def sample(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        theta = _as_angles(angles)
        return np.c_[
            self.origin.x + self.a * np.cos(theta),
            self.origin.y + self.b * np.sin(theta),
            np.full_like(theta, self.origin.z),
        ]

    def sample_derivative(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        theta = _as_angles(angles)
        return np.c_[-self.a * np.sin(theta), self.b * np.cos(theta), np.zeros_like(theta)]


@dataclass(frozen=True)
class Circle(Curve):
    """
    Circle of ``radius`` around ``origin``.

    Evaluates exactly as an Ellipse with a = b = radius; it is kept as its own
    variant so a collection can pick circles out by ``kind``.
    """
    kind: ClassVar[CurveKind] = CurveKind.CIRCLE

    radius: float

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_finite(type(self).__name__, radius=self.radius)

    @property
    def a(self) -> float:
        return self.radius

    @property
    def b(self) -> float:
        return self.radius

    @property
    def is_circular(self) -> bool:
        return True

    def to_ellipse(self) -> Ellipse:
        return Ellipse(self.origin, self.radius, self.radius)

    def calculate(self, angle: float) -> Vector3:
        return self.to_ellipse().calculate(angle)

    def derivative(self, angle: float) -> Vector3:
        return self.to_ellipse().derivative(angle)

    def sample(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        return self.to_ellipse().sample(angles)

    def sample_derivative(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        return self.to_ellipse().sample_derivative(angles)


@dataclass(frozen=True)
class Helix(Curve):
    """
    Helix with an elliptical cross-section.

    Z advances by ``step`` (the pitch) per full revolution. ``angle_start`` is a
    phase offset in radians added to the angle before the Z advance is
    computed; it does not rotate the XY motion.
    """
    kind: ClassVar[CurveKind] = CurveKind.HELIX

    a: float
    b: float
    step: float
    angle_start: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_finite(
            type(self).__name__, a=self.a, b=self.b, step=self.step, angle_start=self.angle_start
        )

    @classmethod
    def circular(cls, origin: VectorLike, radius: float, step: float) -> Helix:
        """Helix with a circular cross-section starting at phase 0."""
        return cls(origin, radius, radius, step, 0.0)

    @property
    def is_circular(self) -> bool:
        return self.a == self.b

    @property
    def rise_per_radian(self) -> float:
        return self.step / TWO_PI

    def calculate(self, angle: float) -> Vector3:
        return Vector3(
            self.origin.x + self.a * math.cos(angle),
            self.origin.y + self.b * math.sin(angle),
            self.origin.z + (self.angle_start + angle) / TWO_PI * self.step
        )

    def derivative(self, angle: float) -> Vector3:
        return Vector3(
            -self.a * math.sin(angle),
            self.b * math.cos(angle),
            self.step / TWO_PI
        )

    def sample(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        theta = _as_angles(angles)
        return np.c_[
            self.origin.x + self.a * np.cos(theta),
            self.origin.y + self.b * np.sin(theta),
            self.origin.z + (self.angle_start + theta) / TWO_PI * self.step,
        ]

    def sample_derivative(self, angles: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
        theta = _as_angles(angles)
        return np.c_[
            -self.a * np.sin(theta),
            self.b * np.cos(theta),
            np.full_like(theta, self.step / TWO_PI),
        ]
