import numbers

import numpy as np

from .errors import InvalidArgument

MAX_TABLE_SIZE = 256


class ColorLookupTable:
    """
    Maps an 8-bit heat value to an RGBA color.

    Built once per gradient configuration and never modified afterwards.
    """
    def __init__(self, colors):
        colors = np.asarray(colors)
        if colors.ndim != 2 or colors.shape[1] != 4:
            raise InvalidArgument(f"Expected (N, 4) RGBA entries, got shape {colors.shape}")
        if not 1 <= len(colors) <= MAX_TABLE_SIZE:
            raise InvalidArgument(f"Table size must be in [1, {MAX_TABLE_SIZE}], got {len(colors)}")
        if colors.dtype != np.uint8 and (colors.min() < 0 or colors.max() > 255):
            raise InvalidArgument("Table channels must be in [0, 255]")

        colors = colors.astype(np.uint8, copy=True)
        colors.setflags(write=False)
        self._colors = colors

    @property
    def alpha(self):
        """Shared alpha of the entries (0.0 to 1.0), or None if they differ."""
        alphas = self._colors[:, 3]
        if (alphas != alphas[0]).any():
            return None
        return int(alphas[0]) / 255

    @property
    def colors(self):
        return self._colors

    @property
    def size(self):
        return len(self._colors)

    def __len__(self):
        return len(self._colors)

    def __getitem__(self, index):
        return tuple(int(c) for c in self._colors[index])

    def lookup(self, intensities):
        """
        Returns the colors for an array of intensities as a new (..., 4) array.
        Values beyond the end of a short table map to its last entry.
        """
        index = np.minimum(np.asarray(intensities, dtype=np.intp), self.size - 1)
        return self._colors[index]

    def __repr__(self):
        return f"ColorLookupTable(size={self.size}, alpha={self.alpha})"


def alpha_to_byte(alpha):
    """Clamp a [0, 1] alpha and scale it to [0, 255]."""
    return int(round(min(max(float(alpha), 0.0), 1.0) * 255))


def build_color_table(strip, size, alpha):
    """
    Creates the color lookup table from a gradient strip.

    Args:
        strip (np.ndarray): (W, 4) or (1, W, 4) RGBA strip, see generate_gradient.
        size (int): Number of entries, 1 to 256.
        alpha (float): Alpha for every entry (0.0 to 1.0). The strip's own
            alpha is ignored.

    Returns:
        ColorLookupTable
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise InvalidArgument(f"Table size must be an integer, got {size!r}")
    if not 1 <= size <= MAX_TABLE_SIZE:
        raise InvalidArgument(f"Table size must be in [1, {MAX_TABLE_SIZE}], got {size}")

    strip = np.asarray(strip)
    if strip.ndim == 3 and strip.shape[0] == 1:
        strip = strip[0]
    if strip.ndim != 2 or strip.shape[1] < 3 or strip.shape[0] < 1:
        raise InvalidArgument(f"Expected a (W, 4) color strip, got shape {strip.shape}")

    width = strip.shape[0]
    # Sample pixels evenly
    positions = (np.arange(size) * width) // size

    colors = np.empty((size, 4), dtype=np.uint8)
    colors[:, :3] = strip[positions, :3]
    colors[:, 3] = alpha_to_byte(alpha)
    return ColorLookupTable(colors)
