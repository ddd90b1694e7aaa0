# controller.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Holds the current xi and the current layout.
# - Every slider event runs one full, synchronous recompute-and-redraw before
#   returning. There is no debouncing and no queue.

from termcolor import cprint

from field import XI_MIN, XI_MAX, XI_STEP
from layout import LayoutConfig
from styling import C

IDLE = 'idle'
REDRAWING = 'redrawing'


def snap_parameter(xi: float) -> float:
    """Clamps xi to the slider domain and snaps it to the 0.01 grid."""
    xi = min(max(float(xi), XI_MIN), XI_MAX)
    return round(round(xi / XI_STEP) * XI_STEP, 2)


class InteractionController:
    """
    Drives a scene from a single parameter value.

    Attributes:
        scene: The scene whose `redraw(surface, xi, layout)` paints the picture.
        surface: The `Surface` the scene draws on.
        xi (float): Current parameter, always on the slider grid.
        layout (LayoutConfig): Current immutable layout.
        state (str): IDLE or REDRAWING.
        last_result: The RedrawResult of the last completed redraw, or None.
    """
    def __init__(self, scene, surface, xi: float = None, layout: LayoutConfig = None, responsive: bool = False):
        self.scene = scene
        self.surface = surface
        self.xi = snap_parameter(scene.default_xi if xi is None else xi)
        self.layout = layout if layout is not None else LayoutConfig.fixed()
        self.responsive = responsive
        self.state = IDLE
        self.last_result = None
        self.redraw_count = 0
        cprint(f"  > Controller ready: variant={scene.variant}, xi={self.xi:.2f}, "
               f"layout={'responsive' if responsive else 'fixed'}", C.DEBUG)

    def set_parameter(self, xi: float):
        """Slider callback: store the new value and redraw immediately."""
        self._ensure_idle()
        self.xi = snap_parameter(xi)
        return self.recompute_and_redraw()

    def on_resize(self, width: float, height: float = None):
        """
        Recomputes the layout for a new container size, then redraws.

        A collapsed container (width or height <= 0, e.g. a minimized window)
        is ignored and leaves the current layout and drawing untouched.
        """
        self._ensure_idle()
        if width <= 0 or (height is not None and height <= 0):
            cprint(f"Ignoring resize to an empty container ({width} x {height}).", C.DEBUG)
            return None
        if self.responsive:
            self.layout = LayoutConfig.responsive(width, height).with_dpi(self.layout.dpi)
        return self.recompute_and_redraw()

    def _ensure_idle(self):
        if self.state == REDRAWING:
            raise RuntimeError("Redraw requested while a redraw is already running.")

    def recompute_and_redraw(self):
        self._ensure_idle()
        if self.surface.acquire() is None:
            cprint(f"Surface not mounted; skipping redraw for xi={self.xi:.2f}.", C.WARNING)
            return None

        self.state = REDRAWING
        try:
            self.last_result = self.scene.redraw(self.surface, self.xi, self.layout)
            self.redraw_count += 1
        finally:
            self.state = IDLE

        self.surface.acquire().canvas.draw_idle()
        return self.last_result

    def bind_slider(self, slider):
        """Connects a matplotlib Slider to this controller."""
        slider.on_changed(self.set_parameter)

    def bind_resize(self, fig):
        """Connects the figure's resize events (pixel width and height) to `on_resize`."""
        fig.canvas.mpl_connect('resize_event', lambda event: self.on_resize(event.width, event.height))
