"""
Unit tests for render configuration.
"""

import json
import pytest
from soundlib.config import RenderConfig, default_config, DEFAULT_SAMPLE_RATE, OVERLAP_DIVISOR
from soundlib.exceptions import ConfigurationError, SoundlibError


class TestRenderConfig:
    """Tests for RenderConfig defaults and validation."""

    def test_defaults(self):
        config = RenderConfig()
        assert config.sample_rate == DEFAULT_SAMPLE_RATE == 48000
        assert config.convolution_mode == 'time'
        assert config.cache_transfer_functions is True
        assert config.max_workers == 1
        assert config.overlap_divisor == OVERLAP_DIVISOR == 64
        assert config.silence_margin_factor == 2

    def test_default_instance(self):
        assert default_config == RenderConfig()

    @pytest.mark.parametrize('kwargs', [
        {'sample_rate': 22050},
        {'convolution_mode': 'overlap-save'},
        {'max_workers': 0},
        {'overlap_divisor': 2},
        {'silence_margin_factor': 0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            RenderConfig(**kwargs)

    def test_error_hierarchy(self):
        with pytest.raises(SoundlibError):
            RenderConfig(sample_rate=1)
        with pytest.raises(ValueError):
            RenderConfig(sample_rate=1)


class TestSerialization:
    """Tests for dictionary and JSON round trips."""

    def test_to_dict(self):
        config_dict = RenderConfig(sample_rate=96000).to_dict()
        assert config_dict['sample_rate'] == 96000
        assert config_dict['convolution_mode'] == 'time'

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigurationError):
            RenderConfig.from_dict({'sample_rate': 48000, 'hop_size': 128})

    def test_save_and_load(self, tmp_path):
        path = tmp_path / 'render.json'
        config = RenderConfig(sample_rate=44100, convolution_mode='fft', max_workers=4)
        config.save(path)

        with open(path) as f:
            assert json.load(f)['convolution_mode'] == 'fft'
        assert RenderConfig.load(path) == config

    def test_load_validates(self, tmp_path):
        path = tmp_path / 'render.json'
        path.write_text(json.dumps({'sample_rate': 8000}))
        with pytest.raises(ConfigurationError):
            RenderConfig.load(path)
