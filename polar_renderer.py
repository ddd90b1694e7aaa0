# polar_renderer.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Radar view of the same field: r(xi, phi) drawn as a closed line in polar
#   coordinates, phi = 0 at the top, increasing clockwise.

import numpy as np

from field import evaluate_field, polar_angles
from styling import COLOR_ACCENT, COLOR_GRID, COLOR_LEGEND_TEXT, FONT_SIZE_TICK

ANGLE_TICKS = (0.0, np.pi / 2, np.pi, 3 * np.pi / 2)
ANGLE_TICK_LABELS = ('0', 'π/2', 'π', '3π/2')

# Fraction of the smaller figure side used by the polar axes
POLAR_EXTENT = 0.78


def polar_series(xi: float):
    """(angles, radii) sampled every 0.01 rad from 0 up to 2pi."""
    angles = polar_angles()
    return angles, evaluate_field(xi, angles)


def format_angle_tick(value: float) -> str:
    """Labels the quarter turns; every other angle gets an empty label."""
    for tick, label in zip(ANGLE_TICKS, ANGLE_TICK_LABELS):
        if value == tick:
            return label
    if value == 2 * np.pi:
        return '2π'
    return ''


def polar_box(layout) -> list:
    """Centered square for the polar axes, in figure fractions."""
    side = POLAR_EXTENT * min(layout.width, layout.height)
    w, h = side / layout.width, side / layout.height
    return [(1 - w) / 2, (1 - h) / 2, w, h]


def draw_polar(fig, xi, layout):
    ax = fig.add_axes(polar_box(layout), projection='polar')
    ax.set_theta_zero_location('N')
    ax.set_theta_direction(-1)

    angles, radii = polar_series(xi)
    ax.plot(angles, radii, color=COLOR_ACCENT, linewidth=2)

    ax.set_xticks(ANGLE_TICKS)
    ax.set_xticklabels([format_angle_tick(t) for t in ANGLE_TICKS])
    ax.set_rlim(bottom=0)
    ax.set_rlabel_position(0)
    ax.tick_params(colors=COLOR_LEGEND_TEXT, labelsize=FONT_SIZE_TICK)
    ax.grid(True, color=COLOR_GRID)
    return ax, (angles, radii)
