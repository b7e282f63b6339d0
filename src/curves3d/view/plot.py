from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from curves3d.config import DEFAULT_PLOT_POINTS, DEFAULT_PLOT_TURNS
from curves3d.model.curves import Curve, CurveKind

if TYPE_CHECKING:
    from matplotlib.figure import Figure

KIND_COLORS: dict[CurveKind, str] = {
    CurveKind.ELLIPSE: "tab:blue",
    CurveKind.CIRCLE: "tab:green",
    CurveKind.HELIX: "tab:red",
}


def plot_curves(
    curves: Iterable[Curve],
    n_points: int = DEFAULT_PLOT_POINTS,
    turns: float = DEFAULT_PLOT_TURNS,
    show: bool = True,
) -> Figure:
    """
    Plot curves on a single 3D axes, coloured by kind.

    Args:
        curves: Curves to draw.
        n_points: Samples per curve.
        turns: Number of revolutions drawn, starting at angle 0.
        show: Call ``plt.show()`` before returning.

    Returns:
        The matplotlib figure.
    """
    angles = np.linspace(0.0, 2.0 * np.pi * turns, n_points)

    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure(figsize=(7, 6))
    ax = fig.add_subplot(projection="3d")

    labelled: set[CurveKind] = set()
    for curve in curves:
        points = curve.sample(angles)
        label = str(curve.kind) if curve.kind not in labelled else None
        labelled.add(curve.kind)
        ax.plot(points[:, 0], points[:, 1], points[:, 2], color=KIND_COLORS[curve.kind], lw=1, label=label)

    ax.set_title("Parametric Curves")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    if labelled:
        ax.legend()

    if show:
        plt.show()
    return fig
