"""
Utility modules for style_stats.
"""

from .content_detector import ContentClassifier, sniff_css

__all__ = [
    "ContentClassifier",
    "sniff_css",
]
