# styling.py v1.1
# Part of Xi Annulus: Interactive Field Viewer
# v1.1: "Centralized Styling"
# - All console colors, matplotlib styles and colormap choices live here.
# - Renderers import their colors from this module instead of hardcoding them.

import matplotlib.pyplot as plt
from termcolor import cprint

# --- Console Colors (using termcolor names) ---
# Usage: cprint("Hello", C.INFO)
class C:
    HEADER = 'magenta'
    SUBHEADER = 'cyan'
    SUCCESS = 'green'
    WARNING = 'yellow'
    ERROR = 'red'
    INFO = 'white'
    DEBUG = 'grey'
    BOLD_ATTR = ['bold']

# --- Matplotlib Plotting Styles ---

# Global style for all plots
plt.style.use('dark_background')

# Common font sizes
FONT_SIZE_TITLE = 16
FONT_SIZE_LABEL = 12
FONT_SIZE_TICK = 11

# 1. Annulus
COLORMAP_NAME = 'plasma'
COLOR_BACKGROUND = '#101018'
COLOR_RING_BORDER = '#FFFFFF'
RING_BORDER_WIDTH = 2.0

# 2. Legend (colorbar)
COLOR_LEGEND_BORDER = '#000000'
COLOR_LEGEND_TEXT = '#E8E8F0'

# 3. Inset curve and radar plot
COLOR_ACCENT = '#8884D8'       # Lavender, same accent as the slider
COLOR_MARKER = '#FFD700'       # Gold
COLOR_GRID = '#3A3A4A'

# 4. Slider widget
COLOR_SLIDER_TRACK = '#2A2A3A'

if __name__ == "__main__":
    cprint("--- styling.py loaded ---", C.SUCCESS)
    cprint("This file contains centralized color and style constants.", C.INFO)
    cprint("Example usage:", C.SUBHEADER, attrs=C.BOLD_ATTR)
    cprint("  from styling import C, COLORMAP_NAME", C.DEBUG)
    cprint("  cprint('Hello!', C.HEADER, attrs=C.BOLD_ATTR)", C.DEBUG)
