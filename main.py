# main.py v1.0
# Part of Xi Annulus: Interactive Field Viewer
# - Opens the interactive viewer (plot + xi slider), or renders a single
#   frame to a PNG with `--save` for headless use.

import argparse
import os

import matplotlib.pyplot as plt
from matplotlib.widgets import Slider

from styling import C, cprint, COLOR_ACCENT, COLOR_SLIDER_TRACK
from field import XI_MIN, XI_MAX, XI_STEP
from layout import LayoutConfig
from scene import SCENES, Surface, create_scene, make_figure
from controller import InteractionController

# Slider strip at the bottom of the figure: [left, bottom, width, height]
SLIDER_BOX = [0.2, 0.02, 0.6, 0.03]


def build_layout(args) -> LayoutConfig:
    if args.responsive:
        return LayoutConfig.responsive(args.width)
    return LayoutConfig.fixed()


def add_slider(fig, controller):
    """Creates the xi slider, registers it as persistent and binds it."""
    slider_ax = fig.add_axes(SLIDER_BOX, facecolor=COLOR_SLIDER_TRACK)
    controller.surface.keep(slider_ax)
    slider = Slider(slider_ax, 'ξ', XI_MIN, XI_MAX, valinit=controller.xi, valstep=XI_STEP,
                    valfmt='%.2f', color=COLOR_ACCENT)
    controller.bind_slider(slider)
    return slider


def main():
    """Entry point for the interactive viewer."""
    parser = argparse.ArgumentParser(description="Interactive viewer for r(xi, phi) = (1 + (xi-2)cos^2 phi)^2 / (xi^2 - xi + 1).")
    parser.add_argument('-v', '--variant', type=str, default='contour', choices=sorted(SCENES),
                        help="Which plot to show: color-mapped annulus or radar plot.")
    parser.add_argument('-x', '--xi', type=float, default=None,
                        help="Initial xi in [0, 3]. Defaults to 0.3 (contour) or 2.0 (polar).")
    parser.add_argument('-r', '--responsive', action='store_true',
                        help="Scale the layout to the window width instead of fixed pixel sizes.")
    parser.add_argument('-W', '--width', type=float, default=700, help="Initial container width in pixels (responsive mode).")
    parser.add_argument('--save', type=str, default=None, help="Render one frame to this PNG file and exit.")
    args = parser.parse_args()

    if args.save:
        plt.switch_backend('Agg')

    cprint("\n--- XI ANNULUS: INTERACTIVE FIELD VIEWER ---", C.HEADER, attrs=C.BOLD_ATTR)

    layout = build_layout(args)
    scene = create_scene(args.variant)
    fig = make_figure(layout)
    controller = InteractionController(scene, Surface(fig), xi=args.xi, layout=layout, responsive=args.responsive)

    if args.save:
        result = controller.recompute_and_redraw()
        fig.savefig(args.save, dpi=layout.dpi, facecolor=fig.get_facecolor())
        plt.close(fig)
        vmin, vmax = result.value_range
        cprint(f"Saved xi={result.xi:.2f} (range {vmin:.4f} .. {vmax:.4f}) to '{os.path.abspath(args.save)}'.", C.SUCCESS)
        return

    slider = add_slider(fig, controller)
    if args.responsive:
        controller.bind_resize(fig)
    controller.recompute_and_redraw()
    cprint("Drag the slider to change xi. Close the window to exit.", C.INFO)
    plt.show()


if __name__ == "__main__":
    main()
