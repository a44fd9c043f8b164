import matplotlib.pyplot as plt
import numpy as np

from sbeam.core import defaults
from sbeam.core.postprocessing.results import MomentDiagram


def plot_moment_diagram(diagram, scale: float = defaults.DIAGRAM_SCALE,
                        ax=None, decimals: int = 1,
                        color=defaults.DIAGRAM_COLOR):
    """
    Draw a sampled moment diagram along the member axis.

    Moments are drawn on the tension side, i.e. sagging moments below the
    axis. Each sample is labelled with its value.

    Parameters
    ----------
    diagram : MomentDiagram or sequence of float
        The diagram, or its six values (five samples and the span).
    scale : float, optional
        Vertical scale of the moment ordinates (default: 10.0).
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created if omitted.
    decimals : int, optional
        Decimals of the labels (default: 1).
    color : str, optional
        Fill colour of the diagram.

    Returns
    -------
    matplotlib.axes.Axes
    """
    if not isinstance(diagram, MomentDiagram):
        diagram = MomentDiagram.from_values(diagram)
    if ax is None:
        _, ax = plt.subplots()

    x = diagram.stations
    z = -scale * diagram.moments

    ax.axhline(0, color='black', linewidth=1)
    if np.any(diagram.moments != 0):
        ax.fill(np.concatenate([[x[0]], x, [x[-1]]]),
                np.concatenate([[0], z, [0]]),
                color=color, alpha=0.6)
        ax.plot(x, z, color='black', linewidth=1)
        for xi, zi, m in zip(x, z, diagram.moments):
            ax.text(xi, zi, f"{m:.{decimals}f}", color=defaults.TEXT_COLOR,
                    ha='center', va='bottom' if zi >= 0 else 'top')

    ax.set_xlabel("x (mm)")
    ax.set_ylabel("M (kNm)")
    ax.set_title("Bending moment")
    return ax


def plot_cross_section(profile, ax=None, color=defaults.SECTION_COLOR):
    """
    Draw the plates of a cross-section builder.

    Parameters
    ----------
    profile : SectionProfile
        :any:`HShape`, :any:`LShape` or :any:`BoxShape`.
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created if omitted.
    color : str, optional
        Fill colour of the plates.

    Returns
    -------
    matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = plt.subplots()

    geom = profile.outline
    polygons = getattr(geom, 'geoms', [geom])
    for poly in polygons:
        y, z = poly.exterior.xy
        ax.fill(y, z, facecolor=color, edgecolor='black')
        for interior in poly.interiors:
            y, z = interior.xy
            ax.fill(y, z, facecolor='white', edgecolor='black')

    ax.set_aspect('equal', 'box')
    ax.set_xlabel("y (mm)")
    ax.set_ylabel("z (mm)")
    ax.set_title(type(profile).__name__)
    return ax
