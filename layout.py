# layout.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - One immutable value carries every size the renderers need.
# - Recomputed from scratch on each resize and handed to the renderers as an
#   argument; nothing here is module state.
# - Pixel coordinates use the screen convention (origin top-left, y down).

from dataclasses import dataclass, replace

# --- Fixed (non-responsive) layout, in pixels ---
FIXED_WIDTH = 700
FIXED_HEIGHT = 600
FIXED_R_INNER = 180
FIXED_R_OUTER = 220
COLORBAR_WIDTH = 30
COLORBAR_HEIGHT = 300
COLORBAR_RIGHT_MARGIN = 80
COLORBAR_TOP = 120

# --- Responsive ratios (fractions of the container width) ---
R_INNER_RATIO = 0.26
R_OUTER_RATIO = 0.31
HEIGHT_RATIO = FIXED_HEIGHT / FIXED_WIDTH

# Inset plot box, as fractions of the figure: (left, top, width, height)
INSET_BOX = (0.07, 0.74, 0.18, 0.16)

DEFAULT_DPI = 100


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in pixels, top-left anchored."""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LayoutConfig:
    width: float
    height: float
    r_inner: float
    r_outer: float
    colorbar: Box
    inset: Box
    dpi: int = DEFAULT_DPI

    @property
    def center(self) -> tuple:
        return self.width / 2, self.height / 2

    @property
    def figsize(self) -> tuple:
        """Figure size in inches for matplotlib."""
        return self.width / self.dpi, self.height / self.dpi

    def to_figure_box(self, box: Box) -> list:
        """Converts a pixel box into matplotlib's [left, bottom, width, height] figure fractions."""
        return [box.x / self.width,
                1.0 - (box.y + box.height) / self.height,
                box.width / self.width,
                box.height / self.height]

    def with_dpi(self, dpi: int) -> "LayoutConfig":
        return replace(self, dpi=dpi)

    @classmethod
    def fixed(cls) -> "LayoutConfig":
        """The constant-pixel layout of the desktop view."""
        return cls(
            width=FIXED_WIDTH,
            height=FIXED_HEIGHT,
            r_inner=FIXED_R_INNER,
            r_outer=FIXED_R_OUTER,
            colorbar=Box(FIXED_WIDTH - COLORBAR_RIGHT_MARGIN, COLORBAR_TOP, COLORBAR_WIDTH, COLORBAR_HEIGHT),
            inset=_inset_box(FIXED_WIDTH, FIXED_HEIGHT),
        )

    @classmethod
    def responsive(cls, width: float, height: float = None) -> "LayoutConfig":
        """
        Layout scaled to a container `width`, keeping the fixed layout's proportions.

        `height` defaults to the fixed layout's aspect ratio; pass the real canvas
        height to follow it instead. Radii and the colorbar always scale with width.
        """
        if width <= 0:
            raise ValueError("Container width must be positive.")
        if height is None:
            height = width * HEIGHT_RATIO
        elif height <= 0:
            raise ValueError("Container height must be positive.")
        scale = width / FIXED_WIDTH
        return cls(
            width=width,
            height=height,
            r_inner=R_INNER_RATIO * width,
            r_outer=R_OUTER_RATIO * width,
            colorbar=Box(width - COLORBAR_RIGHT_MARGIN * scale, COLORBAR_TOP * scale,
                         COLORBAR_WIDTH * scale, COLORBAR_HEIGHT * scale),
            inset=_inset_box(width, height),
        )


def _inset_box(width, height):
    left, top, w, h = INSET_BOX
    return Box(left * width, top * height, w * width, h * height)
