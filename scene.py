# scene.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - `Surface` is the only handle to the drawable figure.
# - Each scene's `redraw` clears everything it drew last time and paints the
#   complete picture for one xi. Axes registered with `Surface.keep` (the
#   slider) survive the clear.

from collections import namedtuple

import matplotlib.pyplot as plt
from termcolor import cprint

from annulus_renderer import draw_annulus, setup_pixel_axes
from color_mapper import ColorMapper
from field import N_ANGULAR, sample_field, value_range
from inset_renderer import draw_inset
from legend_renderer import draw_legend
from polar_renderer import draw_polar
from styling import C, COLOR_BACKGROUND, COLOR_LEGEND_TEXT, FONT_SIZE_LABEL, FONT_SIZE_TITLE

RedrawResult = namedtuple('RedrawResult', ['xi', 'value_range', 'colors'])

CONTOUR_TITLE = r"Annulus Color Mapping: $r = \frac{(1 + (\xi - 2)\cos^2\phi)^2}{\xi^2 - \xi + 1}$"
POLAR_TITLE = r"Polar Plot: $r = (1 + (\xi - 2)\cos^2\phi)^2 / (\xi^2 - \xi + 1)$"


def make_figure(layout):
    """Creates a figure sized in pixels to the layout."""
    return plt.figure(figsize=layout.figsize, dpi=layout.dpi, facecolor=COLOR_BACKGROUND)


class Surface:
    """
    Owns the figure the scenes draw on.

    A surface without a figure is "not mounted" and `acquire` returns None;
    callers skip their redraw in that case.
    """
    def __init__(self, fig=None):
        self.fig = fig
        self._kept = []

    def mount(self, fig):
        self.fig = fig

    def unmount(self):
        self.fig = None
        self._kept = []

    def acquire(self):
        return self.fig

    def keep(self, ax):
        """Marks an axes as persistent across redraws."""
        self._kept.append(ax)

    def clear(self):
        for ax in list(self.fig.axes):
            if ax not in self._kept:
                ax.remove()
        for text in list(self.fig.texts):
            text.remove()


class ContourScene:
    """Annulus + legend + inset curve."""
    variant = 'contour'
    default_xi = 0.3
    title = CONTOUR_TITLE

    def __init__(self, mapper: ColorMapper = None, n_angular: int = N_ANGULAR):
        self.mapper = mapper if mapper is not None else ColorMapper()
        self.n_angular = n_angular

    def redraw(self, surface, xi, layout) -> RedrawResult:
        fig = surface.acquire()
        surface.clear()

        samples = sample_field(xi, self.n_angular)
        vrange = samples.range

        ring_ax = fig.add_axes([0, 0, 1, 1])
        setup_pixel_axes(ring_ax, layout)
        colors = draw_annulus(ring_ax, samples, vrange, layout, self.mapper)
        draw_legend(fig, vrange, layout, self.mapper)
        draw_inset(fig, xi, layout)
        _draw_header(fig, self.title, xi)
        return RedrawResult(xi, vrange, colors)


class PolarScene:
    """Radar plot of the same field."""
    variant = 'polar'
    default_xi = 2.0
    title = POLAR_TITLE

    def redraw(self, surface, xi, layout) -> RedrawResult:
        fig = surface.acquire()
        surface.clear()

        _, (_, radii) = draw_polar(fig, xi, layout)
        _draw_header(fig, self.title, xi)
        return RedrawResult(xi, value_range(radii), None)


def _draw_header(fig, title, xi):
    fig.text(0.5, 0.975, title, ha='center', va='top', color=COLOR_LEGEND_TEXT, fontsize=FONT_SIZE_TITLE)
    fig.text(0.5, 0.915, f"Parameter ξ: {xi:.2f}", ha='center', va='top',
             color=COLOR_LEGEND_TEXT, fontsize=FONT_SIZE_LABEL)


SCENES = {
    'contour': ContourScene,
    'polar': PolarScene,
}


def create_scene(variant: str):
    if variant not in SCENES:
        raise ValueError(f"Unknown plot variant: '{variant}'")
    cprint(f"  > Scene selected: {variant}", C.DEBUG)
    return SCENES[variant]()
