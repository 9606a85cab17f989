"""hanconv CLI - Dictionary-driven script variant converter.

Usage:
    python -m hanconv.main -c s2t -i input.txt -o output.txt
    echo "汉字" | python -m hanconv.main -c data/config/s2t.json
    python -m hanconv.main --list
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional

from . import __version__
from . import config as cfg
from .converter import Converter
from .errors import HanconvError
from .loader import find_preset, list_presets, load_converter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanconv",
        description="hanconv - Dictionary-driven script variant converter",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help=f"Conversion preset (e.g. {cfg.default_preset()}) or config file path",
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--search-path",
        "-p",
        type=Path,
        action="append",
        default=[],
        help="Extra directory to search for configs and dictionaries (repeatable)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available conversion presets",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"hanconv {__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=cfg.get_default("verbose", False),
        help="Log dictionary loading details",
    )
    return parser


def convert_stream(converter: Converter, source: BinaryIO, target: BinaryIO) -> int:
    """Convert line by line, keeping line endings.

    Works on bytes so malformed UTF-8 passes through untouched.

    Returns:
        Number of lines converted.
    """
    count = 0
    for line in source:
        body = line.rstrip(b"\r\n")
        ending = line[len(body):]
        target.write(converter.convert(body))
        target.write(ending)
        count += 1
    return count


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        print("Available conversion presets:")
        for name in list_presets(args.search_path):
            print(f"  {name}")
        return 0

    if not args.config:
        print("Error: Conversion preset is required (-c or --config)", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    config_path = find_preset(args.config, args.search_path)
    if config_path is None:
        print(f"Error: Cannot find configuration: {args.config}", file=sys.stderr)
        return 1

    try:
        converter = load_converter(config_path, args.search_path)
    except (HanconvError, OSError) as e:
        print(f"Error: Failed to create converter: {e}", file=sys.stderr)
        return 1

    try:
        source = open(args.input, "rb") if args.input else sys.stdin.buffer
    except OSError as e:
        print(f"Error: Cannot open input file: {e}", file=sys.stderr)
        return 1

    try:
        try:
            target = open(args.output, "wb") if args.output else sys.stdout.buffer
        except OSError as e:
            print(f"Error: Cannot create output file: {e}", file=sys.stderr)
            return 1

        try:
            lines = convert_stream(converter, source, target)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        finally:
            if args.output:
                target.close()
            else:
                target.flush()
    finally:
        if args.input:
            source.close()

    logger.debug("Converted %d lines with %s", lines, converter.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
