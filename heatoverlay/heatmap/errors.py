class HeatmapError(ValueError):
    """Base class for heat map pipeline errors."""


class InvalidArgument(HeatmapError):
    """Raised when a size, dimension or color argument is out of range."""


class DimensionMismatch(HeatmapError):
    """Raised when two buffers that must line up have different sizes."""
