"""
Command-line interface for soundlib.

    overlap-add       subject sound_file move_width move_velocity end_angle outdir
    fadein-fadeout    subject sound_file move_width move_velocity end_angle outdir
    make-fade-filters length fadein_file fadeout_file
    convert           input_file output_file
"""

import sys
import logging
import argparse
from typing import List, Optional

from .config import RenderConfig, DEFAULT_SAMPLE_RATE, CONVOLUTION_MODES
from .dxx import convert_file
from .exceptions import SoundlibError
from .spatial import render_move, generate_fade_filters
from .utils import RenderMode

logger = logging.getLogger(__name__)


def _add_move_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('subject', help='Subject directory holding SLTF/')
    parser.add_argument('sound_file', help='Source sound (.DXX)')
    parser.add_argument('move_width', type=int, help='Move width in degrees')
    parser.add_argument('move_velocity', type=int, help='Move velocity in degrees per second')
    parser.add_argument('end_angle', type=int, help='End angle in tenths of a degree')
    parser.add_argument('outdir', help='Output directory')
    parser.add_argument('--sr', '--sample-rate', dest='sr', type=int, default=DEFAULT_SAMPLE_RATE, help='Sample rate in Hz')
    parser.add_argument('--convolution', choices=CONVOLUTION_MODES, default='time',
                        help='Convolution engine')
    parser.add_argument('--workers', type=int, default=1,
                        help='Render the four direction/ear combinations in parallel')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='DXX conversion and move synthesis')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages')
    subparsers = parser.add_subparsers(dest='command', required=True)

    overlap_add = subparsers.add_parser('overlap-add', help='Render a move by overlap-add')
    _add_move_arguments(overlap_add)

    fadein_fadeout = subparsers.add_parser('fadein-fadeout', help='Render a move with cross-fades')
    _add_move_arguments(fadein_fadeout)

    filters = subparsers.add_parser('make-fade-filters', help='Write fade-in/fade-out filters')
    filters.add_argument('length', type=int, help='Filter length in samples')
    filters.add_argument('fadein_file', help='Fade-in filter file (.DXX)')
    filters.add_argument('fadeout_file', help='Fade-out filter file (.DXX)')

    convert = subparsers.add_parser('convert', help='Convert between DXX encodings')
    convert.add_argument('input_file', help='Input file (.DXX)')
    convert.add_argument('output_file', help='Output file (.DXX)')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        if args.command in ('overlap-add', 'fadein-fadeout'):
            config = RenderConfig(sample_rate=args.sr,
                                  convolution_mode=args.convolution,
                                  max_workers=args.workers)
            mode = RenderMode.OVERLAP_ADD if args.command == 'overlap-add' else RenderMode.FADEIN_FADEOUT
            render_move(args.subject, args.sound_file, args.move_width, args.move_velocity,
                        args.end_angle, args.outdir, mode=mode, config=config)

        elif args.command == 'make-fade-filters':
            generate_fade_filters(args.length, args.fadein_file, args.fadeout_file)

        elif args.command == 'convert':
            convert_file(args.input_file, args.output_file)

    except SoundlibError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
