"""
style-stats CLI package.

This package provides the command-line interface for the style_stats library.
"""

from .main import main, run

__all__ = ["main", "run"]
