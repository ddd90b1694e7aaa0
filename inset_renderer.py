# inset_renderer.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Cartesian inset of kernel_h / kernel_v over the whole slider domain.
# - A marker and a 3-decimal annotation follow the current xi.
# - The y range is fixed to [0, 4]; the curve is not clipped in the data and
#   simply leaves the box where the ratio exceeds 4.

import numpy as np

from field import XI_MIN, XI_MAX, kernel_ratio
from styling import COLOR_ACCENT, COLOR_GRID, COLOR_MARKER, FONT_SIZE_TICK

INSET_SAMPLES = 200
INSET_Y_LIMITS = (0.0, 4.0)


def inset_curve(n: int = INSET_SAMPLES):
    """(xs, ys): `n` evenly spaced xi values over the domain and their ratios."""
    if n < 2:
        raise ValueError("The inset curve needs at least two points.")
    xs = np.linspace(XI_MIN, XI_MAX, n)
    return xs, kernel_ratio(xs)


def format_annotation(xi: float) -> str:
    return f"{kernel_ratio(xi):.3f}"


def draw_inset(fig, xi, layout):
    ax = fig.add_axes(layout.to_figure_box(layout.inset))
    xs, ys = inset_curve()
    ax.plot(xs, ys, color=COLOR_ACCENT, linewidth=1.5)

    y = kernel_ratio(xi)
    ax.plot([xi], [y], marker='o', color=COLOR_MARKER, markersize=6, zorder=3)
    ax.annotate(format_annotation(xi), xy=(xi, y), xytext=(6, 6), textcoords='offset points',
                color=COLOR_MARKER, fontsize=FONT_SIZE_TICK, annotation_clip=False)

    ax.set_xlim(XI_MIN, XI_MAX)
    ax.set_ylim(*INSET_Y_LIMITS)
    ax.set_xlabel("ξ", fontsize=FONT_SIZE_TICK)
    ax.set_ylabel("kₕ / kᵥ", fontsize=FONT_SIZE_TICK)
    ax.tick_params(labelsize=FONT_SIZE_TICK - 2)
    ax.grid(True, linestyle='--', color=COLOR_GRID, alpha=0.6)
    return ax
