"""
Sample Format Definitions

DXX files are headerless sample files whose extension names the element
type and the encoding: D + {S, F, D} (short, float, double) + {A, B}
(ASCII, binary). Binary files hold little-endian fixed-width records,
text files hold one value per line.
"""

import os
import numpy as np
from enum import Enum

from ..exceptions import UnknownFormatError

BIT_LEN_SHORT = 16
BIT_LEN_FLOAT = 32
BIT_LEN_DOUBLE = 64

BYTE_LEN_SHORT = 2
BYTE_LEN_FLOAT = 4
BYTE_LEN_DOUBLE = 8


class SampleFormat(Enum):
    """
    On-disk sample encodings, keyed by their file extension.

    Attributes:
        SHORT_TEXT: 16-bit signed integers, one decimal value per line
        FLOAT_TEXT: 32-bit floats, one value per line
        DOUBLE_TEXT: 64-bit floats, one value per line
        SHORT_BINARY: little-endian int16 records
        FLOAT_BINARY: little-endian float32 records
        DOUBLE_BINARY: little-endian float64 records
    """
    SHORT_TEXT = 'DSA'
    FLOAT_TEXT = 'DFA'
    DOUBLE_TEXT = 'DDA'
    SHORT_BINARY = 'DSB'
    FLOAT_BINARY = 'DFB'
    DOUBLE_BINARY = 'DDB'

    @property
    def element(self) -> str:
        """Element type name: 'short', 'float' or 'double'"""
        return _ELEMENTS[self.value[1]]

    @property
    def bit_length(self) -> int:
        return _BIT_LENGTHS[self.element]

    @property
    def byte_length(self) -> int:
        return _BYTE_LENGTHS[self.element]

    @property
    def is_binary(self) -> bool:
        return self.value[2] == 'B'

    @property
    def is_text(self) -> bool:
        return self.value[2] == 'A'

    @property
    def dtype(self) -> np.dtype:
        """Little-endian numpy dtype of one on-disk element"""
        return np.dtype(_DTYPES[self.element])

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_extension(cls, extension: str) -> 'SampleFormat':
        """
        Look up a format by file extension.

        The match is case-sensitive; a leading dot is accepted.

        Raises:
            UnknownFormatError: If the extension names no known format
        """
        name = extension[1:] if extension.startswith('.') else extension
        try:
            return cls(name)
        except ValueError:
            raise UnknownFormatError(extension) from None

    @classmethod
    def from_path(cls, path: str) -> 'SampleFormat':
        """Look up the format of a file from its extension."""
        return cls.from_extension(os.path.splitext(os.fspath(path))[1])


_ELEMENTS = {'S': 'short', 'F': 'float', 'D': 'double'}

_BIT_LENGTHS = {
    'short': BIT_LEN_SHORT,
    'float': BIT_LEN_FLOAT,
    'double': BIT_LEN_DOUBLE,
}

_BYTE_LENGTHS = {
    'short': BYTE_LEN_SHORT,
    'float': BYTE_LEN_FLOAT,
    'double': BYTE_LEN_DOUBLE,
}

_DTYPES = {
    'short': '<i2',
    'float': '<f4',
    'double': '<f8',
}
