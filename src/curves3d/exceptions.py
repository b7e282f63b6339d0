"""
Exceptions raised by the curve model.
"""


class CurvesError(Exception):
    """Base class for all curves3d errors."""


class ConstructionError(CurvesError, ValueError):
    """A curve or vector was built from non-finite or malformed parameters."""


class EmptyCollectionError(CurvesError, LookupError):
    """A query needed at least one curve of a given kind and found none."""
