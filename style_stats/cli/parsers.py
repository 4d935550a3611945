"""
Argument parsing functions for CLI operations.

This module builds the argparse parser for the style-stats command.
"""

import argparse
from pathlib import Path


def add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Add stylesheet source arguments."""
    parser.add_argument(
        "inputs",
        nargs="*",
        help="URLs, CSS files, directories of CSS files, or literal CSS text",
    )

    parser.add_argument(
        "-s",
        "--style",
        action="append",
        default=[],
        metavar="CSS",
        help="Literal CSS fragment (can be used multiple times)",
    )


def add_io_arguments(parser: argparse.ArgumentParser) -> None:
    """Add input/output related arguments."""
    parser.add_argument(
        "-f",
        "--format",
        choices=["table", "json", "summary"],
        default="table",
        help="Output format (default: table)",
    )

    parser.add_argument(
        "-o", "--output", type=Path, help="Output file for results (default: stdout)"
    )

    parser.add_argument(
        "-c", "--config", type=Path, help="Configuration file (YAML or JSON)"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )


def add_request_arguments(parser: argparse.ArgumentParser) -> None:
    """Add HTTP request configuration arguments."""
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        dest="headers",
        metavar="KEY:VALUE",
        help="Custom header in 'Key:Value' format (can be used multiple times)",
    )

    parser.add_argument("--user-agent", help="User-Agent header for every request")

    parser.add_argument(
        "--timeout", type=float, help="Total timeout per request in seconds"
    )

    parser.add_argument(
        "--no-compress",
        action="store_true",
        help="Do not request gzip/deflate encoded responses",
    )

    parser.add_argument(
        "--no-verify-ssl", action="store_true", help="Disable SSL verification"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="style-stats",
        description="Collect CSS from pages, files and text and report rule statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  style-stats https://example.com/
  style-stats assets/css/ --format json
  style-stats ".a { color: red }" -s "@media print { .b { color: black } }"
  style-stats https://example.com/ -H "Cookie: session=abc" --timeout 10
        """,
    )

    add_source_arguments(parser)
    add_io_arguments(parser)
    add_request_arguments(parser)

    return parser
