"""Command-line interface for TabPrep.

This module provides the CLI entry point. It handles argument parsing,
settings loading, and dispatching to the pipeline operations:

    tabprep analyze INPUT [--config F] [--output F]
    tabprep parse INPUT [--config F] [--output F]
    tabprep convert INPUT --output F.xlsx [--config F]
    tabprep transform INPUT --output F.xlsx --config F
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from core import (
    ConfigurationError,
    PipelineConfig,
    analyze,
    convert,
    parse,
    transform_to_layout,
)
from level1_ingestion import MalformedInputError
from level5_export import ExportError, render_json_payload, render_layout_workbook
from settings import load_settings
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_CONFIG,
    EXIT_MALFORMED_INPUT,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    PathValidationError,
    get_logger,
    is_supported_input_format,
    setup_logging,
    validate_output_file,
    validate_path_safe,
)

logger = get_logger(__name__)

__all__ = [
    "main",
    "parse_args",
    "run_command",
]


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", type=str, help="CSV or XLSX file to process")
    common.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON pipeline settings",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser = argparse.ArgumentParser(
        description=f"{APP_NAME} - tabular ingestion, validation and column analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", parents=[common], help="Print per-column analysis as JSON"
    )
    analyze_parser.add_argument("--output", type=str, default=None, help="Write JSON here instead of stdout")

    parse_parser = subparsers.add_parser(
        "parse", parents=[common], help="Print records, analysis and rejected rows as JSON"
    )
    parse_parser.add_argument("--output", type=str, default=None, help="Write JSON here instead of stdout")

    convert_parser = subparsers.add_parser(
        "convert", parents=[common], help="Write a Data/Analysis workbook"
    )
    convert_parser.add_argument("--output", type=str, required=True, help="Destination .xlsx file")

    transform_parser = subparsers.add_parser(
        "transform", parents=[common], help="Write one worksheet per configured layout"
    )
    transform_parser.add_argument("--output", type=str, required=True, help="Destination .xlsx file")

    return parser.parse_args(argv)


def read_input(input_path: str) -> bytes:
    """Read the raw input bytes after checking the path."""
    path = validate_path_safe(input_path, must_exist=True, must_be_file=True)
    if not is_supported_input_format(path):
        logger.warning(f"Unexpected input extension '{path.suffix}'; detecting format from content")
    logger.info(f"Reading input: {path}")
    return path.read_bytes()


def write_text_output(text: str, output_path: Optional[str]) -> None:
    if output_path is None:
        sys.stdout.write(text + "\n")
        return
    path = validate_output_file(output_path)
    path.write_text(text + "\n", encoding="utf-8")
    logger.info(f"Wrote {path}")


def write_binary_output(data: bytes, output_path: str) -> None:
    path = validate_output_file(output_path)
    path.write_bytes(data)
    logger.info(f"Wrote {path}")


def report_rejections(rejected_rows: tuple) -> None:
    """Print rejected rows to stderr for binary-output commands."""
    if rejected_rows:
        payload = {"rejectedRows": [row.to_dict() for row in rejected_rows]}
        print(render_json_payload(payload), file=sys.stderr)


def run_command(args: argparse.Namespace, config: PipelineConfig) -> int:
    """Run one CLI command with a loaded configuration.

    Returns:
        Exit code
    """
    raw = read_input(args.input)

    if args.command == "analyze":
        report = analyze(raw, config)
        write_text_output(render_json_payload(report.to_dict()), args.output)
    elif args.command == "parse":
        result = parse(raw, config)
        write_text_output(render_json_payload(result.to_dict()), args.output)
    elif args.command == "convert":
        converted = convert(raw, config)
        write_binary_output(converted.workbook, args.output)
        report_rejections(converted.result.rejected_rows)
    elif args.command == "transform":
        transformed = transform_to_layout(raw, config)
        write_binary_output(render_layout_workbook(transformed.tables), args.output)
        report_rejections(transformed.rejected_rows)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    return EXIT_SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        config = load_settings(Path(args.config) if args.config else None)
        return run_command(args, config)
    except ConfigurationError as e:
        print(f"✗ Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except MalformedInputError as e:
        print(f"✗ Malformed input: {e}", file=sys.stderr)
        return EXIT_MALFORMED_INPUT
    except (PathValidationError, FileNotFoundError) as e:
        print(f"✗ Invalid path: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except ExportError as e:
        print(f"✗ Export failed: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Runtime error: {e}", file=sys.stderr)
        logger.exception("Unexpected error during pipeline execution")
        return EXIT_RUNTIME_ERROR
