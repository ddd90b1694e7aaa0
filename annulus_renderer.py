# annulus_renderer.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Builds one wedge per angular sample and fills it with the color of the
#   value at the wedge's starting angle.
# - Draws the white inner and outer boundary circles on top.
# - The target axes uses pixel coordinates with y pointing down, so angles
#   increase clockwise on screen, starting at 3 o'clock.

from collections import namedtuple

import numpy as np
from matplotlib.collections import PatchCollection
from matplotlib.patches import Circle, Wedge

from styling import COLOR_RING_BORDER, RING_BORDER_WIDTH

# theta_start/theta_end in radians; the span is [theta_start, theta_end).
WedgeSpec = namedtuple('WedgeSpec', ['theta_start', 'theta_end', 'r_inner', 'r_outer', 'value'])


def wedge_bounds(n: int) -> np.ndarray:
    """n + 1 boundaries i/n * 2pi; wedge i spans [bounds[i], bounds[i+1])."""
    if n < 1:
        raise ValueError("At least one wedge is required.")
    return np.arange(n + 1) / n * 2 * np.pi


def build_wedges(samples, layout) -> list:
    """Turns the current samples into wedge specs for the given layout."""
    bounds = wedge_bounds(len(samples))
    return [WedgeSpec(bounds[i], bounds[i + 1], layout.r_inner, layout.r_outer, samples.values[i])
            for i in range(len(samples))]


def setup_pixel_axes(ax, layout):
    """Makes `ax` a borderless canvas whose data units are layout pixels."""
    ax.set_xlim(0, layout.width)
    ax.set_ylim(layout.height, 0)
    ax.set_aspect('equal')
    ax.set_axis_off()


def draw_annulus(ax, samples, value_range, layout, mapper) -> np.ndarray:
    """
    Draws the color-mapped ring onto `ax` and returns the (n, 4) RGBA array
    used for the wedges, in angular order.
    """
    vmin, vmax = value_range
    wedges = build_wedges(samples, layout)
    colors = mapper.map([w.value for w in wedges], vmin, vmax)

    cx, cy = layout.center
    ring_width = layout.r_outer - layout.r_inner
    patches = [Wedge((cx, cy), w.r_outer, np.degrees(w.theta_start), np.degrees(w.theta_end), width=ring_width)
               for w in wedges]
    # Matching edge and face colors hides antialiasing seams between wedges.
    ax.add_collection(PatchCollection(patches, facecolors=colors, edgecolors=colors, linewidth=0.3, zorder=1))

    for radius in (layout.r_inner, layout.r_outer):
        ax.add_patch(Circle((cx, cy), radius, fill=False, edgecolor=COLOR_RING_BORDER,
                            linewidth=RING_BORDER_WIDTH, zorder=2))
    return colors
