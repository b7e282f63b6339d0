"""
Pytest configuration for the curves3d test suite.

Forces the non-interactive matplotlib backend so plot tests never open a window.
"""
import matplotlib

matplotlib.use("Agg")
