"""Streaming filters for fixed-width range-scan frames.

RangeFilter clamps every sample into a fixed interval; TempMedianFilter
returns the per-column median of the last D scans.
"""

from .errors import ConfigError, FilterError, SampleError, ShapeError
from .filters import BaseFilter, RangeFilter, TempMedianFilter, create_filter

__version__ = "1.0.0"

__all__ = [
    "BaseFilter",
    "RangeFilter",
    "TempMedianFilter",
    "create_filter",
    "FilterError",
    "ConfigError",
    "ShapeError",
    "SampleError",
]
