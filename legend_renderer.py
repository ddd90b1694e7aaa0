# legend_renderer.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Vertical gradient bar covering the whole colormap (bottom = low).
# - A right-hand numeric axis labelled with the current (min, max), so the
#   numbers change on every redraw while the gradient stays the same.

import numpy as np

from styling import COLOR_LEGEND_BORDER, COLOR_LEGEND_TEXT, FONT_SIZE_TICK

N_TICKS = 5
GRADIENT_STOPS = 101


def legend_ticks(vmin: float, vmax: float, count: int = N_TICKS):
    """
    Returns (positions, labels) for the legend axis.

    Positions are normalized bar heights in [0, 1] (0 = bottom); labels are
    the matching values with two decimals. A degenerate range gives `count`
    identical labels.
    """
    positions = np.linspace(0.0, 1.0, count)
    values = vmin + positions * (vmax - vmin)
    return positions, [f"{v:.2f}" for v in values]


def gradient_image(mapper, n: int = GRADIENT_STOPS) -> np.ndarray:
    """An (n, 1, 4) RGBA column, row 0 = offset 0.0."""
    stops = mapper.gradient_stops(n)
    return np.array([rgba for _, rgba in stops]).reshape(n, 1, 4)


def draw_legend(fig, value_range, layout, mapper):
    """Adds the colorbar axes at the layout's colorbar box and returns it."""
    vmin, vmax = value_range
    ax = fig.add_axes(layout.to_figure_box(layout.colorbar))
    ax.imshow(gradient_image(mapper), origin='lower', aspect='auto',
              extent=(0.0, 1.0, 0.0, 1.0), interpolation='bilinear')

    positions, labels = legend_ticks(vmin, vmax)
    ax.set_xticks([])
    ax.yaxis.tick_right()
    ax.set_yticks(positions)
    ax.set_yticklabels(labels)
    ax.tick_params(axis='y', colors=COLOR_LEGEND_TEXT, labelsize=FONT_SIZE_TICK)
    for spine in ax.spines.values():
        spine.set_edgecolor(COLOR_LEGEND_BORDER)
        spine.set_linewidth(1.0)
    return ax
