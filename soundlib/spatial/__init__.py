"""
Spatial Rendering Package

Move synthesis: piecewise convolution of a sound with per-angle transfer
functions, accumulated by overlap-add or blended with a fade window.
"""

from .window import generate_fade_window
from .convolution import convolve, linear_convolution_time_domain, linear_convolution_fft
from .angles import overlap_add_angles, fadein_fadeout_angles
from .transfer import TransferFunctionStore
from .renderer import (
    RenderResult, render, render_overlap_add, render_fadein_fadeout,
    render_move, generate_fade_filters, output_path,
)
