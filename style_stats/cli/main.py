#!/usr/bin/env python3
"""
Command-line interface for the style_stats library.

This module collects CSS from the given pages, files and text and prints the
resulting rule statistics as a table, a plain summary or JSON.
"""

import asyncio
import sys
from typing import List, Optional

from ..aggregator import SourceAggregator
from ..config import ConfigLoader, LogLevel
from ..exceptions import FilesystemError, StyleStatsError
from ..logging import setup_logging
from .formatting import create_formatter
from .output import format_output
from .parsers import create_parser
from .utils import apply_overrides, classify_inputs


async def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function. Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    formatter = create_formatter(verbose=args.verbose)

    try:
        config = ConfigLoader().load_config(args.config)
        if args.verbose:
            config.logging.level = LogLevel.DEBUG
        setup_logging(config.logging)
        config = apply_overrides(config, args)

        sources = classify_inputs(args.inputs, args.style)
        result = await SourceAggregator.from_sources(sources, config.fetch).run()
    except StyleStatsError as e:
        formatter.print_error(str(e))
        return 1

    if args.format == "table" and not args.output:
        formatter.print_stats(result)
        return 0

    # Tables are for terminals; files get the plain summary
    format_type = "summary" if args.format == "table" else args.format
    output = format_output(result, format_type, args.verbose)
    if args.output:
        try:
            args.output.write_text(output + "\n", encoding="utf-8")
        except OSError as e:
            error = FilesystemError(f"Cannot write {args.output}: {e}", path=str(args.output))
            formatter.print_error(str(error))
            return 1
    else:
        print(output)

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
