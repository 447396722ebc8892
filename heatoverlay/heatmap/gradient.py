import numpy as np

from .errors import InvalidArgument


def _as_rgba(colors):
    """Normalize a list of (R, G, B) or (R, G, B, A) tuples to an (N, 4) float array."""
    rows = []
    for color in colors:
        if len(color) == 3:
            color = tuple(color) + (255,)
        elif len(color) != 4:
            raise InvalidArgument(f"Colors need 3 or 4 channels, got {color!r}")
        if any(c < 0 or c > 255 for c in color):
            raise InvalidArgument(f"Color channels must be in [0, 255], got {color!r}")
        rows.append(color)
    return np.array(rows, dtype=np.float64)


def generate_gradient(width, colors):
    """
    Creates a 1-pixel high strip filled with a cyclic linear gradient.

    The anchors are evenly spaced over the strip and the last one blends back
    into the first, so the gradient repeats rather than clamping.

    Args:
        width (int): Number of pixels in the strip.
        colors (list): Anchor colors as (R, G, B) or (R, G, B, A) tuples.

    Returns:
        np.ndarray: uint8 array of shape (width, 4), RGBA.
    """
    if width < 1:
        raise InvalidArgument(f"Gradient width must be >= 1, got {width}")
    if len(colors) == 0:
        raise InvalidArgument("At least one anchor color is required")

    anchors = _as_rgba(colors)
    n = len(anchors)

    # Cyclic coordinate of each pixel in anchor units
    t = np.arange(width, dtype=np.float64) * n / width
    lo = np.floor(t).astype(np.int64) % n
    hi = (lo + 1) % n
    frac = (t - np.floor(t))[:, None]

    strip = anchors[lo] * (1 - frac) + anchors[hi] * frac
    return np.clip(np.rint(strip), 0, 255).astype(np.uint8)
