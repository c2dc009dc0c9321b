"""
Command-line interface.

Run with: python -m caustics {caustic,triangle,hello} [options]
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from caustics import config
from caustics.logging_config import setup_logging
from caustics.model.curve import CurveParameters, InvalidParameterError

logger = logging.getLogger("caustics.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="caustics", description="Caustic curve and OpenGL/Qt demos.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    defaults = config.DEFAULT_PARAMETERS
    caustic = sub.add_parser("caustic", help="draw a caustic curve")
    caustic.add_argument("-q", "--points", type=int, default=defaults.point_count, help="number of points Q")
    caustic.add_argument("-p", "--stride", type=int, default=defaults.chord_stride, help="chord stride P")
    caustic.add_argument("-a", "--freq-x", type=int, default=defaults.freq_x, help="x frequency A")
    caustic.add_argument("-b", "--freq-y", type=int, default=defaults.freq_y, help="y frequency B")
    caustic.add_argument("--backend", choices=("gl", "qt"), default="gl", help="renderer (default: gl)")

    sub.add_parser("triangle", help="draw a shader triangle (OpenGL 3.3 core)")
    sub.add_parser("hello", help="show the Qt hello label")
    return parser


def parameters_from_args(args: argparse.Namespace) -> CurveParameters:
    return CurveParameters(
        point_count=args.points,
        chord_stride=args.stride,
        freq_x=args.freq_x,
        freq_y=args.freq_y,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        if args.command == "caustic":
            try:
                params = parameters_from_args(args)
            except InvalidParameterError as e:
                parser.error(str(e))
            if args.backend == "qt":
                from caustics.app.caustic_view import run_caustic_qt
                return run_caustic_qt(params)
            from caustics.gl.caustic import run_caustic
            run_caustic(params)
        elif args.command == "triangle":
            from caustics.gl.triangle import run_triangle
            run_triangle()
        elif args.command == "hello":
            from caustics.app.hello import run_hello
            return run_hello()
    except RuntimeError as e:
        # ShaderError / WindowError
        logger.exception(f"{args.command} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
