"""
curves3d
========
Parametric space curves (ellipses, circles, helices) evaluated at an angle.

The MODEL layer (``curves3d.model``) holds the pure geometry, the VIEW layer
(``curves3d.view``) the matplotlib preview, and ``curves3d.main`` the console
demonstration.
"""
from curves3d.exceptions import ConstructionError, CurvesError, EmptyCollectionError
from curves3d.model.collection import CurveCollection, Evaluation
from curves3d.model.curves import Circle, Curve, CurveKind, Ellipse, Helix
from curves3d.model.geometry_primitives import Vector3

__all__ = [
    "Circle",
    "ConstructionError",
    "Curve",
    "CurveCollection",
    "CurveKind",
    "CurvesError",
    "Ellipse",
    "EmptyCollectionError",
    "Evaluation",
    "Helix",
    "Vector3",
]
