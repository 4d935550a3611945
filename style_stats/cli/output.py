"""
Output formatting functions for CLI operations.

This module renders an aggregation result as text for files and pipes.
"""

import json

from ..models import AggregationResult


def format_output(result: AggregationResult, format_type: str, verbose: bool = False) -> str:
    """Format an aggregation result for output."""
    if format_type == "json":
        data = result.to_dict()
        if not verbose:
            # The full stylesheet is only useful when debugging
            data.pop("cssString")
        return json.dumps(data, indent=2, ensure_ascii=False)

    output_lines = ["Style Stats Summary:"]
    for key, value in result.summary().items():
        output_lines.append(f"  {key}: {value}")

    if verbose and result.selectors:
        output_lines.append("")
        output_lines.append("Selectors:")
        output_lines.extend(f"  {selector}" for selector in result.selectors)

    return "\n".join(output_lines)
