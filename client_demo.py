#!/usr/bin/env python3
#
# PROJECT: hekune
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from hekune.demo import main as demo_main
from hekune.logging_config import setup_logging


def parse_args(argv=None):
    """CLI argument parser for the terminal viewer."""
    epilog = """\
controls:
  Tab / m        toggle camera mode (navigation only works while it is on)
  w a s d        move forward / left / back / right (Shift = fast)
  Space / c      move up / down
  x              toggle slow mode
  arrow keys     look around
  [ ]            fisheye less / more
  - =            tick rate down / up
  q              quit

examples:
  %(prog)s                          Grid and demo cube
  %(prog)s cobra.obj                Load OBJ model
  %(prog)s --fisheye 120 --ascii    Strong fisheye, ASCII output
  %(prog)s --log-file viewer.log -v Debug log to a file
"""
    parser = argparse.ArgumentParser(
        description="Hekune wireframe viewer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--no-hud", action="store_true",
                        help="Hide the status line")
    parser.add_argument("--fisheye", type=int, default=0,
                        help="Fisheye slider position, 0-200 (default: 0)")
    parser.add_argument("--tick-rate", type=int, default=200,
                        help="Tick-rate slider position, 10-600 (default: 200 = 50ms)")
    parser.add_argument("--speed", type=float, default=0.4,
                        help="Base movement per tick in world units (default: 0.4)")
    parser.add_argument("--look-sensitivity", type=float, default=0.02,
                        help="Radians per mouse pixel (default: 0.02)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug-level logging")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO,
                  log_file=args.log_file, console=False)
    try:
        curses.wrapper(lambda s: demo_main(s, args))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.getLogger("hekune").exception("Viewer crashed")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
