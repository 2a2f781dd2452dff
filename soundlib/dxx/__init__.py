"""
DXX Sample Codec

Reading and writing of the six headerless DXX sample encodings.
"""

from .formats import SampleFormat
from .converter import rescale_magnitudes, SHORT_AMPLITUDE, FLOAT_AMPLITUDE
from .io import decode, encode, read, write, read_file, write_file, convert_file
