"""
Move Synthesis Module

This module renders a sound as if its source rotated around the listener.
The source sound is cut into one slice per angle step, each slice is
convolved with the transfer function measured at that step's angle, and the
results are accumulated into a pre-sized output buffer.

Two variants are provided:

- overlap-add: consecutive steps are laid dwelling_samples apart and the
  convolution tails simply sum;
- fade-in/fade-out: the ringing of each convolution is trimmed and
  consecutive steps are blended with the fade window.

Each (direction, ear) combination is rendered into its own buffer and
written as a DDB file. Renders are all-or-nothing per file, but a failure
in one combination does not remove files already written for the others.
"""

import os
import logging
import numpy as np
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..config import RenderConfig, default_config, OUTPUT_PREFIX, OUTPUT_EXTENSION
from ..dxx import SampleFormat, read_file, write_file
from ..exceptions import InvalidArgumentError
from ..utils import Direction, Ear, MoveDescriptor, RenderMode, SampleBuffer, TransferFunction
from .angles import overlap_add_angles, fadein_fadeout_angles, count_steps
from .convolution import convolve
from .transfer import TransferFunctionStore
from .window import generate_fade_window

# Set up logging
logger = logging.getLogger(__name__)

DIRECTIONS = (Direction.CLOCKWISE, Direction.COUNTER_CLOCKWISE)
EARS = (Ear.LEFT, Ear.RIGHT)


@dataclass
class RenderResult:
    """Output of one (direction, ear) render"""
    direction: Direction
    ear: Ear
    samples: SampleBuffer
    angles: List[int]
    path: Optional[str] = None


# =====================================================================================
# Sample bookkeeping
# =====================================================================================

def move_samples(move: MoveDescriptor, sample_rate: int) -> int:
    """Number of samples the move lasts, from whole milliseconds."""
    return int(move.move_time_ms) * sample_rate // 1000


def dwelling_samples(move: MoveDescriptor, sample_rate: int, windowed: bool = False) -> int:
    """
    Samples spent on one angle step.

    Raises:
        InvalidArgumentError: If the move is too short to give every step
            at least one sample
    """
    dwelling = move_samples(move, sample_rate) // count_steps(move, windowed)
    if dwelling <= 0:
        raise InvalidArgumentError(
            f"Move of width {move.move_width} at velocity {move.move_velocity} "
            f"is too short for {count_steps(move, windowed)} steps at {sample_rate} Hz"
        )
    return dwelling


def _cut(sound: np.ndarray, start: int, stop: int) -> np.ndarray:
    """sound[start:stop], zero-padded where the sound has ended."""
    segment = sound[start:stop]
    if len(segment) == stop - start:
        return segment
    logger.warning(f"Sound ends at sample {len(sound)}, zero-padding slice [{start}, {stop})")
    padded = np.zeros(stop - start)
    padded[:len(segment)] = segment
    return padded


def _load_transfer_functions(store: TransferFunctionStore, angles: List[int],
                             ear: Ear) -> List[TransferFunction]:
    transfer_functions = []
    for angle in angles:
        transfer_function = store.load(angle, ear)
        if len(transfer_function) == 0:
            raise InvalidArgumentError(f"Transfer function for angle {angle} ear {ear.value} is empty")
        transfer_functions.append(transfer_function)
    return transfer_functions


# =====================================================================================
# Renderers
# =====================================================================================

def render_overlap_add(sound: SampleBuffer, move: MoveDescriptor, ear: Ear,
                       store: TransferFunctionStore,
                       config: Optional[RenderConfig] = None) -> RenderResult:
    """
    Render one ear of a move by overlap-add.

    Step k convolves sound[dwelling*k : dwelling*(k+1)] (both ends
    included) with the transfer function of its angle and adds the result
    at offset dwelling*k.

    Args:
        sound: Source sound
        move: Move parameters, including the direction
        ear: Ear to render
        store: Transfer functions of the subject
        config: Render configuration

    Returns:
        RenderResult with the accumulated buffer and the visited angles
    """
    if config is None:
        config = default_config
    sound = np.asarray(sound, dtype=np.float64).ravel()

    dwelling = dwelling_samples(move, config.sample_rate)
    angles = overlap_add_angles(move)
    transfer_functions = _load_transfer_functions(store, angles, ear)

    # The last slice reaches one sample past dwelling * move_width
    span = max(move_samples(move, config.sample_rate), dwelling * move.move_width + 1)
    tail = max(len(tf) for tf in transfer_functions)
    move_out = np.zeros(span + tail - 1)

    for step, transfer_function in enumerate(transfer_functions):
        start = dwelling * step
        cut_sound = _cut(sound, start, start + dwelling + 1)
        sound_tf = convolve(cut_sound, transfer_function, config.convolution_mode)
        move_out[start:start + len(sound_tf)] += sound_tf

    return RenderResult(move.direction, ear, move_out, angles)


def render_fadein_fadeout(sound: SampleBuffer, move: MoveDescriptor, ear: Ear,
                          store: TransferFunctionStore,
                          config: Optional[RenderConfig] = None) -> RenderResult:
    """
    Render one ear of a move with windowed cross-fades between steps.

    The move is split into 2 * move_width + 1 half steps of dwelling
    samples, each made of a duration part and an overlap part
    (dwelling / overlap_divisor). A step convolves a slice reaching
    2 * duration samples plus a margin for the transfer function, drops
    silence_margin_factor transfer-function lengths of ringing from each
    end, adds its first overlap samples weighted by the fade-in at
    step * (duration + overlap), and lays its body and fade-out weighted
    tail end-to-end after the previous step. The leading overlap samples
    of the buffer are discarded.
    """
    if config is None:
        config = default_config
    sound = np.asarray(sound, dtype=np.float64).ravel()

    dwelling = dwelling_samples(move, config.sample_rate, windowed=True)
    divisor = config.overlap_divisor
    duration = dwelling * (divisor - 1) // divisor
    overlap = dwelling // divisor
    hop = duration + overlap
    fade_in, fade_out = generate_fade_window(overlap)

    angles = fadein_fadeout_angles(move)
    transfer_functions = _load_transfer_functions(store, angles, ear)

    n_steps = len(angles)
    move_out = np.zeros(overlap + n_steps * (2 * duration - overlap))
    cursor = overlap

    for step, transfer_function in enumerate(transfer_functions):
        tf_len = len(transfer_function)
        margin = config.silence_margin_factor * tf_len
        start = step * hop
        stop = start + 2 * duration + (2 * margin - tf_len) + 1
        cut_sound = _cut(sound, start, stop)

        sound_tf = convolve(cut_sound, transfer_function, config.convolution_mode)
        # Drop the transfer-function ringing at both ends
        sound_tf = sound_tf[margin:len(sound_tf) - margin]

        move_out[start:start + overlap] += sound_tf[:overlap] * fade_in

        body = sound_tf[overlap:len(sound_tf) - overlap]
        move_out[cursor:cursor + len(body)] += body
        cursor += len(body)

        move_out[cursor:cursor + overlap] += sound_tf[len(sound_tf) - overlap:] * fade_out
        cursor += overlap

    return RenderResult(move.direction, ear, move_out[overlap:], angles)


def render(sound: SampleBuffer, move: MoveDescriptor, ear: Ear,
           store: TransferFunctionStore, mode: RenderMode = RenderMode.OVERLAP_ADD,
           config: Optional[RenderConfig] = None) -> RenderResult:
    """Render one (direction, ear) buffer with the given renderer variant."""
    if mode is RenderMode.OVERLAP_ADD:
        return render_overlap_add(sound, move, ear, store, config)
    if mode is RenderMode.FADEIN_FADEOUT:
        return render_fadein_fadeout(sound, move, ear, store, config)
    raise InvalidArgumentError(f"Unknown render mode: {mode!r}")


# =====================================================================================
# Entry points
# =====================================================================================

def output_path(out_dir: Union[str, os.PathLike], move: MoveDescriptor, ear: Ear) -> str:
    """
    Path of the rendered file for a move and ear.

    Examples:
        >>> move = MoveDescriptor(5, 10, 450, Direction.COUNTER_CLOCKWISE)
        >>> os.path.basename(output_path('out', move, Ear.LEFT))
        'move_judge_w005_mt010_cc_450_L.DDB'
    """
    filename = (f"{OUTPUT_PREFIX}_w{move.move_width:03d}_mt{move.move_velocity:03d}"
                f"_{move.direction.value}_{move.end_angle}_{ear.value}.{OUTPUT_EXTENSION}")
    return os.path.join(os.fspath(out_dir), filename)


def render_move(subject: Union[str, os.PathLike], sound_file: Union[str, os.PathLike],
                move_width: int, move_velocity: int, end_angle: int,
                out_dir: Union[str, os.PathLike],
                mode: RenderMode = RenderMode.OVERLAP_ADD,
                config: Optional[RenderConfig] = None) -> List[RenderResult]:
    """
    Render a move for both directions and both ears and write the results.

    Four files are written to out_dir, in the order c/L, c/R, cc/L, cc/R
    when rendering sequentially. A failed render raises before its own file
    is written; files already written for other combinations are left in
    place.

    Args:
        subject: Subject directory holding SLTF/SLTF_{angle}_{ear}.DDB
        sound_file: Source sound, any DXX format
        move_width: Width of the move in degrees
        move_velocity: Angular velocity in degrees per second
        end_angle: End angle in tenths of a degree
        out_dir: Output directory, created if missing
        mode: Renderer variant
        config: Render configuration

    Returns:
        One RenderResult per (direction, ear), with its output path set
    """
    if config is None:
        config = default_config

    base_move = MoveDescriptor(move_width, move_velocity, end_angle)
    sound = read_file(sound_file)
    store = TransferFunctionStore(subject, cache=config.cache_transfer_functions)
    os.makedirs(out_dir, exist_ok=True)

    jobs: List[Tuple[Direction, Ear]] = [(direction, ear) for direction in DIRECTIONS for ear in EARS]

    def run(job: Tuple[Direction, Ear]) -> RenderResult:
        direction, ear = job
        move = base_move.with_direction(direction)
        result = render(sound, move, ear, store, mode, config)

        path = output_path(out_dir, move, ear)
        write_file(path, result.samples)
        result.path = path

        logger.info(f"{path}: length={len(result.samples)}")
        logger.info(f"used angle:{result.angles}")
        return result

    if config.max_workers == 1:
        return [run(job) for job in jobs]

    with ThreadPoolExecutor(max_workers=min(config.max_workers, len(jobs))) as executor:
        futures = [executor.submit(run, job) for job in jobs]
        return [future.result() for future in futures]


def generate_fade_filters(length: int, fadein_file: Union[str, os.PathLike],
                          fadeout_file: Union[str, os.PathLike]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate the fade window and write its two halves to DXX files.

    Both extensions are checked before anything is written.

    Returns:
        Tuple of (fade_in, fade_out)
    """
    SampleFormat.from_path(fadein_file)
    SampleFormat.from_path(fadeout_file)

    fade_in, fade_out = generate_fade_window(length)
    write_file(fadein_file, fade_in)
    write_file(fadeout_file, fade_out)
    logger.info(f"Wrote {length}-sample fade filters to {fadein_file} and {fadeout_file}")
    return fade_in, fade_out
