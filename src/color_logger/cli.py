"""Demo console that prints every message style.

Run via ``python -m color_logger.cli [options]`` to check how the colors render in
the current terminal.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from colorama import just_fix_windows_console

from .colors import Background, Foreground
from .config import LoggerConfig
from .log_sink import ConsoleLogSink, FileLogSink, LogSink
from .logger import ColorLogger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--name", dest="name", default="color-logger")
    parser.add_argument("--verbose", dest="verbose", action="store_true")
    parser.add_argument("--quiet", dest="quiet", action="store_true")
    parser.add_argument("--clamp", dest="clamp", action="store_true")
    parser.add_argument("--file", dest="file", help="Append to a file instead of stdout.")
    parser.add_argument("--help", "-h", action="store_true")
    return parser


def _print_cli_usage() -> None:
    print("Color logger demo")
    print("Usage: python -m color_logger.cli [options]")
    print("Options (defaults in parentheses):")
    print("  --name=NAME         Logger name (color-logger).")
    print("  --verbose           Force verbose output (from COLOR_LOGGER_DEVELOPMENT).")
    print("  --quiet             Force non-verbose output.")
    print("  --clamp             Clamp RGB components into 0-255 (off).")
    print("  --file=PATH         Append plain lines to PATH instead of stdout.")
    print("  --help              Show this message.")


def run_demo(logger: ColorLogger) -> None:
    """Write one message of each style through ``logger``."""
    logger.log_startup_banner()
    logger.log("verbose message")
    logger.log("explicit foreground", Foreground.BRIGHT_CYAN)
    logger.log("explicit colors", Foreground.BRIGHT_WHITE, Background.BLUE)
    logger.log_warning("warning message")
    logger.log_error("error message")
    logger.log_plain("plain message")
    logger.log_rgb("rgb message", 255, 128, 0)
    logger.log_back_rgb("rgb message on rgb background", 0, 0, 0, 0, 200, 120)


def main(argv: list[str] | None = None) -> int:
    """Run the demo.

    :param argv: Optional argument list. If omitted, uses ``sys.argv[1:]``.
    :returns: Process exit code.
    """
    argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.help:
        _print_cli_usage()
        return 0

    # Windows consoles need VT processing enabled for raw escapes
    just_fix_windows_console()

    config = LoggerConfig.default(args.name)
    if args.verbose:
        config = replace(config, verbose=True)
    if args.quiet:
        config = replace(config, verbose=False)
    if args.clamp:
        config = replace(config, clamp_rgb=True)

    sink: LogSink
    if args.file:
        sink = FileLogSink(Path(args.file).expanduser().resolve())
    else:
        sink = ConsoleLogSink(sys.stdout)

    run_demo(ColorLogger.from_config(config, sink=sink))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
