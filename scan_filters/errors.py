class FilterError(Exception):
    """Base class for every error raised by the scan filters."""


class ConfigError(FilterError, ValueError):
    """Invalid filter parameters (construction, reconfiguration or factory lookup)."""


class ShapeError(FilterError, ValueError):
    """Frame length or dimensionality does not match the filter."""


class SampleError(FilterError, ValueError):
    """Frame holds a NaN sample, which cannot be ordered."""
