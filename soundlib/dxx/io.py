"""
DXX File Format and I/O Operations Module

This module contains functions for reading and writing DXX sample files.
Every format is decoded into the canonical buffer, a 1-D float64 numpy
array, and encoded back from it. Short and float encodings go through the
amplitude rescaling laws of the converter module; double encodings are
stored as is.
"""

import os
import re
import logging
import numpy as np
from typing import BinaryIO, Union

from .formats import SampleFormat
from .converter import (
    int16s_to_float64s, float32s_to_float64s,
    float64s_to_int16s, float64s_to_float32s,
)
from ..exceptions import MalformedSampleError, SampleIOError

# Set up logging
logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

_SHORT_LINE = re.compile(r'[+-]?[0-9]+')
_SHORT_MIN = -32768
_SHORT_MAX = 32767

# printf-style templates for the text encodings
_TEXT_TEMPLATES = {
    'short': '{:d}\n',
    'float': '{:e}\n',
    'double': '{:.16e}\n',  # 17 significant digits round-trip a double
}


# =====================================================================================
# Byte-level codec
# =====================================================================================

def decode(data: bytes, fmt: SampleFormat) -> np.ndarray:
    """
    Decode the contents of a DXX file into a canonical sample buffer.

    Args:
        data: Raw file contents
        fmt: Encoding of the contents

    Returns:
        float64 array of samples in file order

    Raises:
        MalformedSampleError: If a line of a text encoding cannot be parsed
    """
    if fmt.is_text:
        raw = _decode_text(data, fmt)
    else:
        raw = _decode_binary(data, fmt)

    if fmt.element == 'short':
        return int16s_to_float64s(raw)
    if fmt.element == 'float':
        return float32s_to_float64s(raw)
    return raw.astype(np.float64)


def encode(samples, fmt: SampleFormat) -> bytes:
    """
    Encode a canonical sample buffer as the contents of a DXX file.

    Args:
        samples: 1-D sequence of real samples
        fmt: Target encoding

    Returns:
        The encoded bytes
    """
    values = np.asarray(samples, dtype=np.float64).ravel()

    if fmt.element == 'short':
        values = float64s_to_int16s(values)
    elif fmt.element == 'float':
        values = float64s_to_float32s(values)

    if fmt.is_binary:
        return values.astype(fmt.dtype).tobytes()

    template = _TEXT_TEMPLATES[fmt.element]
    return ''.join(template.format(v) for v in values.tolist()).encode('ascii')


def _decode_binary(data: bytes, fmt: SampleFormat) -> np.ndarray:
    width = fmt.byte_length
    n_records = len(data) // width
    remainder = len(data) - n_records * width
    if remainder:
        # A partial trailing record ends the stream
        logger.debug(f"Ignoring {remainder} trailing bytes of a partial {fmt.value} record")
    if n_records == 0:
        return np.zeros(0, dtype=fmt.dtype)
    return np.frombuffer(data, dtype=fmt.dtype, count=n_records)


def _decode_text(data: bytes, fmt: SampleFormat) -> np.ndarray:
    try:
        text = data.decode('ascii')
    except UnicodeDecodeError as e:
        raise MalformedSampleError(f"{fmt.value} data is not ASCII text") from e

    if fmt.element == 'short':
        parse = _parse_short
        dtype = np.int16
    else:
        parse = _parse_float
        dtype = np.float32 if fmt.element == 'float' else np.float64

    values = []
    for number, line in enumerate(text.splitlines(), start=1):
        try:
            values.append(parse(line.strip(), dtype))
        except ValueError as e:
            raise MalformedSampleError(f"Invalid {fmt.value} sample: {e}", number, line) from e

    return np.array(values, dtype=dtype)


def _parse_short(token: str, dtype) -> int:
    if not _SHORT_LINE.fullmatch(token):
        raise ValueError("not a base-10 integer")
    value = int(token)
    if not _SHORT_MIN <= value <= _SHORT_MAX:
        raise ValueError("out of 16-bit range")
    return value


def _parse_float(token: str, dtype) -> float:
    if not token or '_' in token:
        raise ValueError("not a floating point literal")
    value = float(token)
    if dtype is np.float32 and np.isfinite(value):
        with np.errstate(over='ignore'):
            if not np.isfinite(np.float32(value)):
                raise ValueError("out of 32-bit float range")
    return value


# =====================================================================================
# Streams and files
# =====================================================================================

def read(stream: BinaryIO, fmt: SampleFormat) -> np.ndarray:
    """
    Read a whole binary stream as the given format.

    Raises:
        SampleIOError: If reading the stream fails
        MalformedSampleError: If a text line cannot be parsed
    """
    try:
        data = stream.read()
    except OSError as e:
        raise SampleIOError(f"Failed to read {fmt.value} stream: {e}") from e
    return decode(data, fmt)


def write(stream: BinaryIO, fmt: SampleFormat, samples) -> None:
    """
    Write samples to a binary stream in the given format.

    Raises:
        SampleIOError: If writing the stream fails
    """
    payload = encode(samples, fmt)
    try:
        stream.write(payload)
    except OSError as e:
        raise SampleIOError(f"Failed to write {fmt.value} stream: {e}") from e


def read_file(filename: PathLike) -> np.ndarray:
    """
    Read a DXX file, taking the format from its extension.

    Args:
        filename: Path to a .DSA/.DFA/.DDA/.DSB/.DFB/.DDB file

    Returns:
        float64 array of samples

    Raises:
        UnknownFormatError: If the extension is not a DXX extension (the
            file is not opened)
        SampleIOError: If the file cannot be read
        MalformedSampleError: If a text line cannot be parsed
    """
    fmt = SampleFormat.from_path(filename)
    try:
        with open(filename, 'rb') as f:
            return read(f, fmt)
    except SampleIOError:
        raise
    except OSError as e:
        raise SampleIOError(f"Failed to read {filename}: {e}") from e


def write_file(filename: PathLike, samples) -> None:
    """
    Write a DXX file, taking the format from its extension.

    The samples are encoded before the file is created, so an unknown
    extension leaves the file system untouched.

    Raises:
        UnknownFormatError: If the extension is not a DXX extension
        SampleIOError: If the file cannot be written
    """
    fmt = SampleFormat.from_path(filename)
    payload = encode(samples, fmt)
    try:
        with open(filename, 'wb') as f:
            f.write(payload)
    except OSError as e:
        raise SampleIOError(f"Failed to write {filename}: {e}") from e
    logger.debug(f"Wrote {len(payload)} bytes to {filename}")


def convert_file(input_file: PathLike, output_file: PathLike) -> np.ndarray:
    """
    Convert a DXX file to another DXX encoding.

    Args:
        input_file: Source file, format from its extension
        output_file: Destination file, format from its extension

    Returns:
        The canonical buffer that was written
    """
    # Reject a bad destination before any file is read
    SampleFormat.from_path(output_file)
    samples = read_file(input_file)
    write_file(output_file, samples)
    logger.info(f"Converted {input_file} to {output_file} ({len(samples)} samples)")
    return samples
