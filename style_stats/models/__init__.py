"""
Data models and configuration classes for the style_stats library.

This package contains the transport configuration, fetched responses, the
parsed CSS tree and the aggregation result.
"""

# Import all models for easy access
from .base import *
from .http import *
from .result import *

__all__ = [
    # Base models and types
    "ContentKind",
    "RequestHeaders",
    "BaseConfig",
    # HTTP models
    "FetchConfig",
    "FetchedResponse",
    # Inputs, parsed tree and result
    "SourceSet",
    "Declaration",
    "StyleRule",
    "MediaRule",
    "AtRule",
    "ParsedRule",
    "AggregationResult",
]
