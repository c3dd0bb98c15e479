#!/usr/bin/env python3
"""
Main entry point for wslconv
Converts paths between Windows and WSL form from the command line
"""

import sys
import json
import logging
import argparse
import copy
from typing import List, Optional

from wsl_pathconv.config.settings import ConverterConfig, get_config
from wsl_pathconv.core.converter import Direction, ConversionResult, convert
from wsl_pathconv.core.errors import ErrorKind
from wsl_pathconv.utils.clipboard import copy_to_clipboard
from wsl_pathconv.utils.paths import detect_direction

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_RELATIVE_PATH = 3
EXIT_INVALID_PREFIX = 4

EXIT_CODES = {
    ErrorKind.RELATIVE_PATH: EXIT_RELATIVE_PATH,
    ErrorKind.INVALID_PREFIX: EXIT_INVALID_PREFIX,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wslconv",
        description="Convert paths between Windows and WSL form (purely lexical)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=r"""
Examples:
  # Windows to WSL
  wslconv --to-wsl "C:\Program Files (x86)\Foo"

  # WSL to Windows
  wslconv --to-windows /mnt/c/Users/me/file.txt

  # Detect the direction per path, read paths from stdin
  printf '%s\n' 'D:\data' /mnt/e/logs | wslconv

  # JSON output and copy the result to the clipboard
  wslconv --json --copy /mnt/c/Windows

Exit codes:
  0 success, 2 usage error, 3 relative path, 4 invalid prefix
        """,
    )

    # Direction (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--to-wsl", action="store_true", help="Convert Windows paths to WSL paths"
    )
    mode_group.add_argument(
        "--to-windows", action="store_true", help="Convert WSL paths to Windows paths"
    )
    mode_group.add_argument(
        "--auto",
        action="store_true",
        help="Detect the direction of each path (default)",
    )

    parser.add_argument(
        "paths", nargs="*", help="Paths to convert (read from stdin if omitted)"
    )

    # Configuration options
    parser.add_argument("--config", type=str, help="Path to configuration JSON file")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--copy", action="store_true", help="Copy converted paths to the clipboard"
    )
    parser.add_argument(
        "--show-source",
        action="store_true",
        help="Print each source path next to its conversion",
    )
    parser.add_argument(
        "--fail-fast", action="store_true", help="Stop at the first failing path"
    )

    # Debug options
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")

    return parser


def create_config(args) -> ConverterConfig:
    """Create configuration from arguments"""
    # Start with base configuration
    if args.config:
        config = ConverterConfig.from_file(args.config)
    else:
        # Work on a copy so flags never leak into the shared instance
        config = copy.deepcopy(get_config())

    # Override with command-line arguments
    if args.to_wsl:
        config.direction = Direction.TO_WSL.value
    elif args.to_windows:
        config.direction = Direction.TO_WINDOWS.value
    elif args.auto:
        config.direction = "auto"

    if args.json:
        config.output.format = "json"

    if args.copy:
        config.output.copy_to_clipboard = True

    if args.show_source:
        config.output.show_source = True

    if args.fail_fast:
        config.fail_fast = True

    if args.debug:
        config.debug = True

    if args.log_file:
        config.logging.log_file = args.log_file

    return config


def setup_logging(config: ConverterConfig):
    """Configure root logging: stderr plus an optional log file"""
    if config.debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, config.logging.level.upper(), logging.WARNING)

    handlers = [logging.StreamHandler(sys.stderr)]
    if config.logging.log_file:
        handlers.append(logging.FileHandler(config.logging.log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=config.logging.format,
        handlers=handlers,
        force=True,
    )


def read_paths(stream) -> List[str]:
    """One path per line; blank lines are skipped"""
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def resolve_direction(path: str, direction: str) -> Direction:
    if direction != "auto":
        return Direction(direction)
    # Paths in neither style go to the Windows parser, which rejects them as relative
    return detect_direction(path) or Direction.TO_WSL


def run_conversions(paths: List[str], config: ConverterConfig) -> int:
    """Convert every path, print the results and return the exit code"""
    results: List[ConversionResult] = []
    exit_code = EXIT_OK
    as_json = config.output.format == "json"

    for path in paths:
        result = convert(path, resolve_direction(path, config.direction))
        results.append(result)

        if result.ok:
            if not as_json:
                if config.output.show_source:
                    print(f"{result.source}\t{result.output}")
                else:
                    print(result.output)
            continue

        logger.info(f"Failed to convert {path!r}: {result.error}")
        if not as_json:
            print(f"❌ {result.error_kind.value}: {result.error}", file=sys.stderr)
        if exit_code == EXIT_OK:
            exit_code = EXIT_CODES[result.error_kind]
        if config.fail_fast:
            break

    if as_json:
        print(json.dumps([r.to_dict() for r in results], indent=2))

    if config.output.copy_to_clipboard:
        converted = [r.output for r in results if r.ok]
        if converted:
            copy_to_clipboard("\n".join(converted))

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI argument parsing"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = create_config(args)
    except (OSError, ValueError) as e:
        print(f"❌ Could not load configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    if not config.validate():
        return EXIT_USAGE

    try:
        setup_logging(config)
    except OSError as e:
        print(f"❌ Could not open log file: {e}", file=sys.stderr)
        return EXIT_USAGE

    paths = args.paths or read_paths(sys.stdin)
    if not paths:
        print("❌ No paths given", file=sys.stderr)
        return EXIT_USAGE

    logger.debug(f"Converting {len(paths)} path(s), direction={config.direction}")
    return run_conversions(paths, config)


if __name__ == "__main__":
    sys.exit(main())
