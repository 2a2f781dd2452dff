"""
Configuration Management Module

This module provides centralized configuration management for soundlib,
including constants, default render settings, and configuration utilities.
"""

from typing import Dict, Any
from dataclasses import dataclass, asdict
import json

from .exceptions import ConfigurationError


# =====================================================================================
# Constants
# =====================================================================================

# Default sample rate of the sound and transfer-function files
DEFAULT_SAMPLE_RATE = 48000  # Hz
SUPPORTED_SAMPLE_RATES = [44100, 48000, 96000]

# Angles are bookkept in tenths of a degree
ANGLE_RESOLUTION = 3600

# Fade-in/fade-out rendering: one step in OVERLAP_DIVISOR is cross-faded
OVERLAP_DIVISOR = 64
# Transfer-function lengths dropped from each end of a windowed step
SILENCE_MARGIN_FACTOR = 2

# Transfer-function store layout
TRANSFER_FUNCTION_DIR = 'SLTF'
TRANSFER_FUNCTION_PREFIX = 'SLTF'

# Every rendered output is written as raw little-endian doubles
OUTPUT_EXTENSION = 'DDB'
OUTPUT_PREFIX = 'move_judge'

CONVOLUTION_MODES = ['time', 'fft']


# =====================================================================================
# Configuration Classes
# =====================================================================================

@dataclass
class RenderConfig:
    """Configuration for move synthesis"""

    # General settings
    sample_rate: int = DEFAULT_SAMPLE_RATE

    # Convolution engine: 'time' (direct summation) or 'fft'
    convolution_mode: str = 'time'

    # Transfer-function store
    cache_transfer_functions: bool = True

    # The four (direction, ear) renders are independent
    max_workers: int = 1

    # Fade-in/fade-out settings
    overlap_divisor: int = OVERLAP_DIVISOR
    silence_margin_factor: int = SILENCE_MARGIN_FACTOR

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.sample_rate not in SUPPORTED_SAMPLE_RATES:
            raise ConfigurationError(f"Sample rate {self.sample_rate} not supported. Use one of: {SUPPORTED_SAMPLE_RATES}")

        if self.convolution_mode not in CONVOLUTION_MODES:
            raise ConfigurationError(f"Convolution mode must be one of: {CONVOLUTION_MODES}")

        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")

        # keeps the cross-faded part of a step at most half its body
        if self.overlap_divisor < 3:
            raise ConfigurationError("overlap_divisor must be at least 3")

        if self.silence_margin_factor < 1:
            raise ConfigurationError("silence_margin_factor must be at least 1")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'RenderConfig':
        """Create configuration from dictionary"""
        unknown = set(config_dict) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**config_dict)

    def save(self, file_path: str) -> None:
        """Save configuration to file"""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, file_path: str) -> 'RenderConfig':
        """Load configuration from file"""
        with open(file_path, 'r') as f:
            return cls.from_dict(json.load(f))


# Create a default configuration
default_config = RenderConfig()
