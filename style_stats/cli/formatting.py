"""
Formatting utilities for the style-stats CLI.

This module renders results and messages on the terminal with rich.
"""

import json
from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..models import AggregationResult

# Global console instances; diagnostics go to stderr
console = Console()
error_console = Console(stderr=True)


class Formatter:
    """Formatting utilities for CLI output."""

    def __init__(self, verbose: bool = False, out: Optional[Console] = None):
        self.verbose = verbose
        self.console = out or console

    def print_error(self, message: str) -> None:
        """Print an error message with red X."""
        error_console.print(f"✗ {message}", style="bold red")

    def print_json(self, data: Any, title: Optional[str] = None) -> None:
        """Print JSON data with syntax highlighting."""
        json_str = json.dumps(data, indent=2, ensure_ascii=False)
        syntax = Syntax(json_str, "json", theme="monokai")
        if title:
            self.console.print(Panel(syntax, title=title, border_style="cyan"))
        else:
            self.console.print(syntax)

    def print_stats(self, result: AggregationResult) -> None:
        """Print the result counts in a table."""
        table = Table(title="Style Stats", show_header=True, header_style="bold magenta")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="white", justify="right")

        for key, value in result.summary().items():
            table.add_row(key, f"{value:,}")

        self.console.print(table)

        if self.verbose and result.selectors:
            selectors = Table(title="Selectors", show_header=False)
            selectors.add_column("Selector", style="green")
            for selector in result.selectors:
                selectors.add_row(selector)
            self.console.print(selectors)


def create_formatter(verbose: bool = False) -> Formatter:
    """Create a formatter for terminal output."""
    return Formatter(verbose=verbose)
