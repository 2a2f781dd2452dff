"""
Angle Sequences of a Move

A move visits one transfer-function angle per step. The angle offset of a
step is a triangle wave made by reflecting a sawtooth counter, so a move
that ran past its width would sweep back again. Offsets are in the same
tenth-of-a-degree units as the transfer-function names.
"""

from typing import List

from ..config import ANGLE_RESOLUTION
from ..utils import Direction, MoveDescriptor


def triangle_angle(step: int, half_period: int) -> int:
    """
    Fold a sawtooth counter into a triangle wave in [0, half_period].

    Examples:
        >>> [triangle_angle(k, 2) for k in range(6)]
        [0, 1, 2, 1, 0, 1]
    """
    angle = step % (half_period * 2)
    if angle > half_period:
        angle = half_period * 2 - angle
    return angle


def lookup_angle(offset: int, direction: Direction, end_angle: int) -> int:
    """
    Absolute transfer-function angle of an offset from the end angle.

    Counter-clockwise moves negate the offset. The result is in
    [0, ANGLE_RESOLUTION).
    """
    if direction is Direction.COUNTER_CLOCKWISE:
        offset = -offset
    offset %= ANGLE_RESOLUTION
    return (end_angle + offset) % ANGLE_RESOLUTION


def overlap_add_angles(move: MoveDescriptor) -> List[int]:
    """One angle per degree of the move, move_width steps."""
    return [
        lookup_angle(triangle_angle(step, move.move_width), move.direction, move.end_angle)
        for step in range(move.move_width)
    ]


def fadein_fadeout_angles(move: MoveDescriptor) -> List[int]:
    """
    Angles of the 2 * move_width + 1 half steps of a windowed move.

    The triangle runs over twice the width and is halved afterwards,
    truncating toward zero, so each angle is held for two half steps.
    """
    angles = []
    for step in range(move.move_width * 2 + 1):
        offset = triangle_angle(step, move.move_width * 2)
        if move.direction is Direction.COUNTER_CLOCKWISE:
            offset = -offset
        offset = int(offset / 2)
        angles.append(lookup_angle(offset, Direction.CLOCKWISE, move.end_angle))
    return angles


def count_steps(move: MoveDescriptor, windowed: bool = False) -> int:
    """Number of angle steps a render of the move takes."""
    if windowed:
        return move.move_width * 2 + 1
    return move.move_width
