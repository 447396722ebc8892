import numpy as np

from .errors import InvalidArgument

VALUE = 0
ALPHA = 1


def generate_radial_stamp(diameter):
    """
    Creates a monochrome dot fading linearly from full intensity at the
    center to fully transparent at the edge of the inscribed circle.

    Returns:
        np.ndarray: uint8 array of shape (diameter, diameter, 2) holding
        intensity in channel 0 and alpha in channel 1.
    """
    if diameter < 1:
        raise InvalidArgument(f"Dot diameter must be >= 1, got {diameter}")

    radius = diameter / 2.0
    # Distances are measured from pixel centers
    coords = np.arange(diameter, dtype=np.float64) + 0.5 - radius
    xx, yy = np.meshgrid(coords, coords)
    dist = np.sqrt(xx ** 2 + yy ** 2)

    falloff = np.clip(1.0 - dist / radius, 0.0, 1.0)
    level = np.rint(falloff * 255).astype(np.uint8)

    dot = np.stack([level, level], axis=-1)
    dot.setflags(write=False)
    return dot
