# render_sweep.py v1.1
# Part of Xi Annulus: Interactive Field Viewer
# - Renders one PNG per xi step across a range, in parallel worker processes.
# - Workers return None on success or an error string, so a single bad frame
#   never stops the sweep.
# - Frames go to <output>/frames/; metadata.json describing the sweep goes to <output>/.

import argparse
import json
import multiprocessing as mp
import os
import shutil
import traceback

import matplotlib
matplotlib.use('Agg') # Use a non-interactive backend for multiprocessing
import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

from styling import C, cprint
from field import XI_MIN, XI_MAX, XI_STEP
from layout import LayoutConfig
from scene import SCENES, Surface, create_scene, make_figure
from controller import InteractionController, snap_parameter


def sweep_values(start: float, stop: float, step: float = XI_STEP) -> list:
    """xi values from start to stop inclusive, snapped to the slider grid."""
    if step <= 0:
        raise ValueError("Sweep step must be positive.")
    if not (XI_MIN <= start <= XI_MAX and XI_MIN <= stop <= XI_MAX):
        raise ValueError(f"Sweep range must lie within [{XI_MIN}, {XI_MAX}].")
    if stop < start:
        raise ValueError("Sweep stop must not be below start.")
    count = int(np.floor((stop - start) / step + 1e-9)) + 1
    return [snap_parameter(start + i * step) for i in range(count)]


def frame_filename(frames_dir: str, frame_num: int) -> str:
    return os.path.join(frames_dir, f"frame_{frame_num:05d}.png")


def render_xi_worker(args_tuple):
    """Renders a single xi to a PNG. Returns None on success, an error string otherwise."""
    frame_num, xi, variant, layout_width, frames_dir = args_tuple
    try:
        scene = create_scene(variant)
        layout = LayoutConfig.responsive(layout_width) if layout_width else LayoutConfig.fixed()
        fig = make_figure(layout)
        controller = InteractionController(scene, Surface(fig), xi=xi, layout=layout)
        controller.recompute_and_redraw()
        fig.savefig(frame_filename(frames_dir, frame_num), dpi=layout.dpi, facecolor=fig.get_facecolor())
        plt.close(fig)
        return None
    except Exception as e:
        return f"Frame {frame_num} (xi={xi:.2f}): Error - {type(e).__name__} - {e}\n{traceback.format_exc()}"


def main():
    """Main function to orchestrate a sweep render."""
    if os.name != 'posix':
        mp.set_start_method('spawn', force=True)

    parser = argparse.ArgumentParser(description="Render a sweep of xi values to PNG frames.")
    parser.add_argument('output_directory', type=str, help="Directory that receives the frames and metadata.json.")
    parser.add_argument('-v', '--variant', type=str, default='contour', choices=sorted(SCENES), help="Plot variant to render.")
    parser.add_argument('--start', type=float, default=XI_MIN, help="First xi of the sweep.")
    parser.add_argument('--stop', type=float, default=XI_MAX, help="Last xi of the sweep (inclusive).")
    parser.add_argument('--step', type=float, default=0.05, help="xi increment between frames.")
    parser.add_argument('-W', '--width', type=float, default=None, help="Render with a responsive layout of this width.")
    parser.add_argument('-p', '--processes', type=int, default=None, help="Number of worker processes (default: all cores).")
    args = parser.parse_args()

    OUT_DIR = args.output_directory
    FRAMES_DIR = os.path.join(OUT_DIR, 'frames')
    try:
        values = sweep_values(args.start, args.stop, args.step)
    except ValueError as e:
        parser.error(str(e))
    cprint(f"\n--- XI SWEEP: {args.variant} | {len(values)} frames ({values[0]:.2f} .. {values[-1]:.2f}) ---",
           C.SUBHEADER, attrs=C.BOLD_ATTR)

    # Only the frames/ subdirectory belongs to this tool; nothing else in OUT_DIR is touched.
    if os.path.exists(FRAMES_DIR):
        cprint(f"Warning: Frames directory '{FRAMES_DIR}' already exists. Overwriting.", C.WARNING)
        shutil.rmtree(FRAMES_DIR)
    os.makedirs(FRAMES_DIR)

    tasks = [(i, xi, args.variant, args.width, FRAMES_DIR) for i, xi in enumerate(values)]
    num_processes = min(args.processes or mp.cpu_count(), len(tasks))
    bar = dict(total=len(tasks), desc="Rendering Frames", bar_format="{l_bar}{bar:30}{r_bar}")
    if num_processes == 1:
        results = [render_xi_worker(task) for task in tqdm(tasks, **bar)]
    else:
        with mp.Pool(processes=num_processes) as pool:
            results = list(tqdm(pool.imap_unordered(render_xi_worker, tasks), **bar))

    failed_frames = [res for res in results if res is not None]
    if failed_frames:
        cprint(f"\nWarning: {len(failed_frames)} frame(s) failed to render.", C.WARNING)
        for message in failed_frames:
            cprint(message, C.ERROR)

    layout = LayoutConfig.responsive(args.width) if args.width else LayoutConfig.fixed()
    metadata = {'variant': args.variant, 'start': values[0], 'stop': values[-1], 'step': args.step,
                'frame_count': len(values) - len(failed_frames), 'xi_values': values,
                'layout': {'width': layout.width, 'height': layout.height,
                           'r_inner': layout.r_inner, 'r_outer': layout.r_outer}}
    with open(os.path.join(OUT_DIR, "metadata.json"), 'w') as f:
        json.dump(metadata, f, indent=4)

    cprint(f"\nFrames saved in '{FRAMES_DIR}'.", C.SUCCESS)


if __name__ == "__main__":
    main()
