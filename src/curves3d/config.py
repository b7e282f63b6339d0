"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (display precision, sample ranges)
   scattered throughout the code.
2. Reproducibility: The demonstration defaults live in one place, so the CLI,
   the generator and the tests agree on them.

Exports:
    DISPLAY_PRECISION (int): Decimals used when printing a Vector3.
    DEFAULT_CURVE_COUNT (int): Number of curves in a generated sample.
    PARAMETER_LOW, PARAMETER_HIGH (int): Inclusive range of generated parameters.
    DEFAULT_ANGLE (float): Angle in radians at which the demo evaluates curves.
    DEFAULT_PLOT_POINTS (int): Samples per curve in the 3D preview.
    DEFAULT_PLOT_TURNS (float): Revolutions drawn per curve in the 3D preview.
"""
import math

DISPLAY_PRECISION: int = 2

DEFAULT_CURVE_COUNT: int = 100
PARAMETER_LOW: int = 1
PARAMETER_HIGH: int = 100

DEFAULT_ANGLE: float = math.pi / 4

DEFAULT_PLOT_POINTS: int = 200
DEFAULT_PLOT_TURNS: float = 2.0
