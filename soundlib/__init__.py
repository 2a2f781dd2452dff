"""
soundlib

Conversion between the DXX sample encodings and spatial move synthesis:
rendering a sound as if its source rotated around the listener by
convolving slices of it with per-angle transfer functions.
"""

from .dxx import SampleFormat, read_file, write_file, convert_file
from .spatial import render_move, generate_fade_filters
from .utils import Direction, Ear, MoveDescriptor, RenderMode
from .config import RenderConfig

__version__ = '0.1.0'
