"""
Utility functions for CLI operations.

This module contains helpers that turn command-line arguments into library
inputs.
"""

import sys
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError

from ..config.models import StyleStatsConfig
from ..exceptions import InvalidArgumentError
from ..models import FetchConfig, RequestHeaders, SourceSet


def parse_headers(header_strings: Optional[List[str]]) -> Dict[str, str]:
    """
    Parse header strings into a dictionary.

    Args:
        header_strings: List of header strings in "key:value" format,
                       or None if no headers provided

    Returns:
        Dictionary with header names as keys and values as strings.

    Note:
        Invalid header formats are reported on stderr and skipped.

    Example:
        ```python
        headers = parse_headers(["Cookie:session=abc", "Referer: https://example.com/"])
        # Returns: {"Cookie": "session=abc", "Referer": "https://example.com/"}
        ```
    """
    headers = {}
    if header_strings:
        for header_string in header_strings:
            if ":" in header_string:
                key, value = header_string.split(":", 1)
                headers[key.strip()] = value.strip()
            else:
                print(f"Warning: Invalid header format: {header_string}", file=sys.stderr)
    return headers


def classify_inputs(inputs: Sequence[str], styles: Sequence[str] = ()) -> SourceSet:
    """
    Build the source set for a run.

    Positional inputs are sorted into locators, files and CSS text; ``--style``
    fragments are appended to the CSS text.
    """
    sources = SourceSet.from_inputs(inputs)
    return SourceSet(sources.urls, sources.files, sources.styles + tuple(styles))


def apply_overrides(config: StyleStatsConfig, args) -> StyleStatsConfig:
    """Apply command-line transport options on top of a loaded configuration."""
    fetch = config.fetch
    updates: Dict[str, object] = {}

    if args.timeout is not None:
        updates["total_timeout"] = args.timeout
    if args.no_compress:
        updates["compress"] = False
    if args.no_verify_ssl:
        updates["verify_ssl"] = False

    custom_headers = parse_headers(args.headers)
    if custom_headers or args.user_agent:
        updates["headers"] = RequestHeaders(
            user_agent=args.user_agent or fetch.headers.user_agent,
            accept=fetch.headers.accept,
            accept_language=fetch.headers.accept_language,
            custom_headers={**fetch.headers.custom_headers, **custom_headers},
        )

    if not updates:
        return config

    try:
        fetch = FetchConfig.model_validate({**fetch.model_dump(), **updates})
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid option: {e}") from e
    return config.model_copy(update={"fetch": fetch})
