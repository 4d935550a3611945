"""
Document parsers for style_stats.

This package extracts stylesheets from HTML and turns CSS text into rule
statistics.
"""

from .css_parser import RuleExtractor, RuleStats, parse_stylesheet, split_selectors
from .html_extractor import ExtractedStyles, HtmlStylesheetExtractor

__all__ = [
    "RuleExtractor",
    "RuleStats",
    "parse_stylesheet",
    "split_selectors",
    "HtmlStylesheetExtractor",
    "ExtractedStyles",
]
