"""
Unit tests for the sample format definitions.
"""

import pytest
import numpy as np
from soundlib.dxx.formats import SampleFormat
from soundlib.exceptions import UnknownFormatError


class TestExtensionMapping:
    """Tests for extension to format lookup."""

    def test_all_extensions(self):
        """Every DXX extension maps to its format."""
        assert SampleFormat.from_extension('DSA') is SampleFormat.SHORT_TEXT
        assert SampleFormat.from_extension('DFA') is SampleFormat.FLOAT_TEXT
        assert SampleFormat.from_extension('DDA') is SampleFormat.DOUBLE_TEXT
        assert SampleFormat.from_extension('DSB') is SampleFormat.SHORT_BINARY
        assert SampleFormat.from_extension('DFB') is SampleFormat.FLOAT_BINARY
        assert SampleFormat.from_extension('DDB') is SampleFormat.DOUBLE_BINARY

    def test_leading_dot(self):
        assert SampleFormat.from_extension('.DDB') is SampleFormat.DOUBLE_BINARY

    def test_case_sensitive(self):
        """Lowercase extensions are not DXX extensions."""
        with pytest.raises(UnknownFormatError):
            SampleFormat.from_extension('ddb')

    @pytest.mark.parametrize('extension', ['', 'WAV', 'DXB', 'DDBB'])
    def test_unknown(self, extension):
        with pytest.raises(UnknownFormatError):
            SampleFormat.from_extension(extension)

    def test_from_path(self, tmp_path):
        assert SampleFormat.from_path('/data/sound.DSB') is SampleFormat.SHORT_BINARY
        assert SampleFormat.from_path(tmp_path / 'x.DFA') is SampleFormat.FLOAT_TEXT

    def test_from_path_without_extension(self):
        with pytest.raises(UnknownFormatError):
            SampleFormat.from_path('/data/sound')


class TestFormatProperties:
    """Tests for the width constants of each format."""

    def test_bit_lengths(self):
        assert SampleFormat.SHORT_TEXT.bit_length == 16
        assert SampleFormat.FLOAT_BINARY.bit_length == 32
        assert SampleFormat.DOUBLE_TEXT.bit_length == 64

    def test_byte_lengths(self):
        assert SampleFormat.SHORT_BINARY.byte_length == 2
        assert SampleFormat.FLOAT_BINARY.byte_length == 4
        assert SampleFormat.DOUBLE_BINARY.byte_length == 8

    def test_binary_and_text(self):
        for fmt in SampleFormat:
            assert fmt.is_binary != fmt.is_text
        assert SampleFormat.DOUBLE_BINARY.is_binary
        assert SampleFormat.SHORT_TEXT.is_text

    def test_dtypes_are_little_endian(self):
        assert SampleFormat.SHORT_BINARY.dtype == np.dtype('<i2')
        assert SampleFormat.FLOAT_BINARY.dtype == np.dtype('<f4')
        assert SampleFormat.DOUBLE_BINARY.dtype == np.dtype('<f8')

    def test_element_names(self):
        assert [fmt.element for fmt in SampleFormat] == [
            'short', 'float', 'double', 'short', 'float', 'double'
        ]
