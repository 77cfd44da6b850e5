#
# PROJECT: wirespin
# MODULE: wirespin/cli.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.7
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import shutil
import sys

from .canvas import TerminalCanvas
from .config import RenderConfig
from .driver import AnimationState, main as demo_main, tick
from .errors import WirespinError
from .loader import load_default_object, load_object_from_file
from .logging_config import setup_logging
from .projection import PROJECTIONS, make_projection
from .transform import rotate_y

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                                   Spinning bundled cube
  %(prog)s mesh.json                         Load a JSON polygon list
  %(prog)s mesh.json --speed 20 --ascii      Slow spin, ASCII density glyphs
  %(prog)s --projection orthographic         No perspective foreshortening
  %(prog)s --snapshot --angle 30             Print one frame and exit
"""
    parser = argparse.ArgumentParser(
        prog="wirespin",
        description="Spinning wireframe mesh renderer for the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to a JSON mesh file")
    parser.add_argument("--projection", choices=sorted(PROJECTIONS),
                        default="perspective", help="Projection (default: perspective)")
    parser.add_argument("--speed", type=float, default=None,
                        help="Rotation speed in degrees per second (default: 60)")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--bg-color", default=None,
                        help="Background color in hex #RRGGBB (default: #000000)")
    parser.add_argument("--snapshot", action="store_true",
                        help="Render a single frame to stdout instead of animating")
    parser.add_argument("--angle", type=float, default=0.0,
                        help="Y rotation in degrees applied before --snapshot")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    config = RenderConfig.detect_terminal()
    if args.ascii:
        config.use_braille = False
    if args.no_color:
        config.use_color = False
    if args.speed is not None:
        config.rotation_speed = args.speed
    if args.bg_color:
        config.clear_color = args.bg_color
    return config


def snapshot(obj, config: RenderConfig, projection: str, angle: float,
             cols: int, rows: int) -> str:
    """Render one frame of `obj` into text."""
    canvas = TerminalCanvas(cols, rows, config)
    if angle:
        rotate_y(obj, angle)
    state = AnimationState(obj=obj, surface=canvas,
                           projection=make_projection(projection, config),
                           clear_color=config.clear_color)
    tick(state, 0.0)
    return canvas.to_text()


def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.debug else logging.INFO
    # curses owns the terminal while animating, so only log to a file then
    setup_logging(level, args.log_file, console=args.snapshot)

    try:
        obj = load_object_from_file(args.model) if args.model else load_default_object()
    except WirespinError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = build_config(args)

    if args.snapshot:
        size = shutil.get_terminal_size((80, 24))
        print(snapshot(obj, config, args.projection, args.angle,
                       size.columns - 1, size.lines - 1))
        return 0

    logger.info("Starting animation: %d polygons, projection=%s, speed=%.1f deg/s",
                len(obj), args.projection, config.rotation_speed)
    try:
        curses.wrapper(lambda s: demo_main(s, obj, config, args.projection))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
