"""
GeoView CLI - Main entry point.

Converts WKT geometries into GeoJSON geometry text.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, TextIO

from geoview_geojson import (
    FormatterConfig,
    GeoJSONError,
    GeometryFormatter,
    LogEvent,
    WKTGeometryParser,
    attach_stream_handler,
    create_logger,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def read_wkt_file(path: str) -> List[str]:
    """
    Read WKT geometries from a text file, one per line.

    Blank lines and lines starting with '#' are skipped.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    wkt_path = Path(path)
    if not wkt_path.exists():
        raise FileNotFoundError(f"WKT file not found: {path}")

    with open(wkt_path, encoding="utf-8") as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.lstrip().startswith("#")
        ]


def resolve_options(args: argparse.Namespace, config: FormatterConfig) -> FormatterConfig:
    """
    Apply command-line overrides on top of file configuration.

    In pretty mode a missing line prefix becomes "" so that output is
    always indented.
    """
    if args.indent is not None:
        config = replace(config, indent=args.indent)

    options = config.default_options
    if args.pretty is not None:
        options = replace(options, pretty=args.pretty)
    if args.line_prefix is not None:
        options = replace(options, line_prefix=args.line_prefix)
    if options.pretty and options.line_prefix is None:
        options = replace(options, line_prefix="")

    return replace(config, default_options=options)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="geoview-geojson",
        description="GeoView CLI - Convert WKT geometries to GeoJSON geometry text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Compact output
  geoview-geojson "POINT (-105 39.5)"

  # Indented output, 4 spaces per level
  geoview-geojson --pretty --indent 4 "POLYGON ((0 0, 1 0, 1 1, 0 0))"

  # One WKT per line from a file, settings from YAML
  geoview-geojson --config config/geojson.yaml --file shapes.wkt
"""
    )

    parser.add_argument(
        "wkt",
        nargs="*",
        help="WKT geometries to convert"
    )
    parser.add_argument(
        "--file", "-f",
        help="Read WKT geometries from file (one per line)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Formatter config YAML (indent, allow_non_finite, pretty, line_prefix)"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Spaces per nesting level (default: 2)"
    )

    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "--pretty",
        dest="pretty",
        action="store_const",
        const=True,
        default=None,
        help="Multi-line indented output"
    )
    layout.add_argument(
        "--compact",
        dest="pretty",
        action="store_const",
        const=False,
        help="Single-line output (default)"
    )

    parser.add_argument(
        "--line-prefix",
        default=None,
        help="String prepended to every line in pretty mode"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="ERROR",
        help="Structured log level on stderr (default: ERROR)"
    )
    return parser


def run(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None
) -> int:
    """
    Run the CLI.

    Returns:
        Exit code: 0 on success, 1 on input, config or format errors
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.wkt and not args.file:
        parser.print_help(stderr)
        return 1

    # JSON log lines go to the same stderr as error messages, for this run only
    package_logger = logging.getLogger("geoview_geojson")
    previous_level = package_logger.level
    package_logger.setLevel(getattr(logging, args.log_level))
    handler = attach_stream_handler(stderr)
    logger = create_logger("cli")

    try:
        if args.config:
            try:
                config = FormatterConfig.from_yaml(args.config)
            except (OSError, ValueError) as e:
                logger.error(
                    event=LogEvent.CONFIG_ERROR,
                    message="Failed to load formatter config",
                    metadata={'path': args.config},
                    exc_info=e
                )
                raise
            logger.info(
                event=LogEvent.CONFIG_LOADED,
                message="Loaded formatter config",
                metadata={'path': args.config, 'indent': config.indent}
            )
        else:
            config = FormatterConfig()

        config = resolve_options(args, config)
        formatter = GeometryFormatter.from_config(
            config, logger=create_logger("formatter")
        )
        wkt_parser = WKTGeometryParser(logger=create_logger("wkt"))

        inputs = list(args.wkt)
        if args.file:
            inputs.extend(read_wkt_file(args.file))

        for wkt in inputs:
            shape = wkt_parser.parse(wkt)
            if shape is None:
                stdout.write("null\n")
                continue

            text = formatter.format_with(shape)
            if not config.default_options.pretty:
                text += "\n"
            stdout.write(text)

    except (GeoJSONError, OSError, ValueError) as e:
        print(f"Error: {e}", file=stderr)
        return 1
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)

    return 0


def main():
    """Main CLI entry point."""
    sys.exit(run())


if __name__ == '__main__':
    main()
