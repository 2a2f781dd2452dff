"""
General Utility Functions and Definitions

This module contains type definitions, enumerations and data classes
used across the soundlib codebase.

See Also:
    - config: For centralized configuration management
    - spatial.angles: For the angle sequence a MoveDescriptor produces
"""

import numpy as np
from enum import Enum, auto
from dataclasses import dataclass

from .exceptions import InvalidArgumentError

# Type aliases for improved readability
SampleBuffer = np.ndarray  # Shape: (n_samples,), float64
TransferFunction = np.ndarray  # Shape: (n_taps,), float64


class Ear(Enum):
    """
    Ear a transfer function was measured at.

    The value is the label used in transfer-function and output file names.
    """
    LEFT = 'L'
    RIGHT = 'R'


class Direction(Enum):
    """
    Rotation direction of a move.

    Attributes:
        CLOCKWISE: Angles grow from the end angle
        COUNTER_CLOCKWISE: Angles shrink from the end angle
    """
    CLOCKWISE = 'c'
    COUNTER_CLOCKWISE = 'cc'


class RenderMode(Enum):
    """
    Renderer variants.

    Attributes:
        OVERLAP_ADD: Convolution tails of consecutive steps are summed
        FADEIN_FADEOUT: Consecutive steps are blended with a fade window
    """
    OVERLAP_ADD = auto()
    FADEIN_FADEOUT = auto()


@dataclass(frozen=True)
class MoveDescriptor:
    """
    Parameters of a simulated source rotation.

    Attributes:
        move_width: Width of the move in degrees
        move_velocity: Angular velocity in degrees per second
        end_angle: Angle the move is anchored at, in tenths of a degree.
            Kept as given for output names; reduced modulo 3600 on lookup
        direction: Rotation direction
    """
    move_width: int
    move_velocity: int
    end_angle: int
    direction: Direction = Direction.CLOCKWISE

    def __post_init__(self):
        for name in ('move_width', 'move_velocity', 'end_angle'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
        if self.move_width <= 0:
            raise InvalidArgumentError(f"move_width must be positive, got {self.move_width}")
        if self.move_velocity <= 0:
            raise InvalidArgumentError(f"move_velocity must be positive, got {self.move_velocity}")
        if not isinstance(self.direction, Direction):
            raise InvalidArgumentError(f"direction must be a Direction, got {self.direction!r}")

    @property
    def move_time_ms(self) -> float:
        """Duration of the move in milliseconds"""
        return self.move_width * 1000.0 / self.move_velocity

    def with_direction(self, direction: Direction) -> 'MoveDescriptor':
        return MoveDescriptor(self.move_width, self.move_velocity, self.end_angle, direction)
