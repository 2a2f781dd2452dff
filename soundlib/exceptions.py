"""
Custom Exceptions Module

This module defines the exception hierarchy for soundlib, providing
specific error types for the sample codec and the spatial renderer.
"""


class SoundlibError(Exception):
    """Base exception class for all soundlib errors."""
    pass


class ConfigurationError(SoundlibError, ValueError):
    """Error in render configuration."""
    pass


class InvalidArgumentError(SoundlibError, ValueError):
    """Error due to input values outside the valid domain."""
    pass


class UnknownFormatError(SoundlibError):
    """Error when a file extension does not name a known sample format."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unknown sample format: {extension!r}")


class MalformedSampleError(SoundlibError):
    """Error when a line of a text sample file cannot be parsed."""

    def __init__(self, message: str, line: int = None, text: str = None):
        self.line = line
        self.text = text
        if line is not None:
            message = f"{message} (line {line}: {text!r})"
        super().__init__(message)


class SampleIOError(SoundlibError, OSError):
    """Error during sample file I/O operations."""
    pass


class MissingTransferFunctionError(SampleIOError):
    """Error when no transfer function exists for a required angle and ear."""

    def __init__(self, angle: int, ear: str, path: str):
        self.angle = angle
        self.ear = ear
        self.path = path
        super().__init__(f"Transfer function not found for angle {angle} ear {ear}: {path}")


class ConvolutionError(SoundlibError):
    """Error in the convolution engine."""
    pass
