# color_mapper.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Turns raw field values into plasma colors for the annulus and the legend.
# - The colormap is sampled once into a fixed lookup table; the table is
#   never modified afterwards.

import numpy as np
import matplotlib.pyplot as plt
from termcolor import cprint

from styling import C, COLORMAP_NAME

LUT_SIZE = 256
MIN_GRADIENT_STOPS = 100


def normalize(values, vmin: float, vmax: float):
    """
    Maps `values` linearly from [vmin, vmax] onto [0, 1] and clamps the result.

    A degenerate range (vmax == vmin) maps everything to the midpoint 0.5.
    Accepts a scalar (returns float) or an array (returns ndarray).
    """
    values = np.asarray(values, dtype=float)
    span = vmax - vmin
    if span == 0:
        t = np.full(values.shape, 0.5)
    else:
        t = np.clip((values - vmin) / span, 0.0, 1.0)
    if t.ndim == 0:
        return float(t)
    return t


class ColorMapper:
    """
    Immutable continuous colormap [0, 1] -> RGBA, backed by a lookup table.

    Attributes:
        name (str): The matplotlib colormap the table was sampled from.
        lut (np.ndarray): Read-only array of shape (LUT_SIZE, 4).
    """
    def __init__(self, name: str = COLORMAP_NAME, lut_size: int = LUT_SIZE):
        if lut_size < 2:
            raise ValueError("Lookup table needs at least two entries.")
        self.name = name
        self.lut = plt.get_cmap(name)(np.linspace(0.0, 1.0, lut_size))
        self.lut.setflags(write=False)
        cprint(f"  > ColorMapper ready: '{name}' ({lut_size} entries)", C.DEBUG)

    def color(self, t):
        """
        Looks up the color for a normalized value (or array of values).

        Out-of-range input is clamped. Returns an RGBA tuple for a scalar and
        an (n, 4) array otherwise.
        """
        t = np.clip(np.asarray(t, dtype=float), 0.0, 1.0)
        indices = np.rint(t * (len(self.lut) - 1)).astype(int)
        rgba = self.lut[indices]
        if rgba.ndim == 1:
            return tuple(float(c) for c in rgba)
        return rgba

    def map(self, values, vmin: float, vmax: float):
        """Normalizes raw values against (vmin, vmax) and returns their colors."""
        return self.color(normalize(values, vmin, vmax))

    def gradient_stops(self, n: int = 101) -> list:
        """
        `n` evenly spaced (offset, rgba) pairs across the whole colormap,
        from offset 0.0 to 1.0 inclusive.
        """
        if n < MIN_GRADIENT_STOPS:
            raise ValueError(f"A smooth gradient needs at least {MIN_GRADIENT_STOPS} stops.")
        offsets = np.linspace(0.0, 1.0, n)
        return [(float(t), self.color(t)) for t in offsets]
