import numpy as np

from .errors import InvalidArgument, DimensionMismatch
from .heat_buffer import HeatBuffer


def colorize(heat, table):
    """
    Returns the colorized heat map as a new (H, W, 4) RGBA array.
    Heat values index the lookup table directly.
    """
    values = heat.values if isinstance(heat, HeatBuffer) else np.asarray(heat)
    if values.ndim != 2:
        raise InvalidArgument(f"Heat must be a 2D buffer, got shape {values.shape}")
    return table.lookup(values)


def compose(background, overlay):
    """
    Blends the RGBA overlay over the background (source-over).

        out = overlay * a + background * (1 - a),  a = overlay alpha / 255

    The result has the background's channel count; an RGBA background keeps
    its own alpha channel.
    """
    background = np.asarray(background)
    overlay = np.asarray(overlay)

    if background.dtype != np.uint8 or overlay.dtype != np.uint8:
        raise InvalidArgument(
            f"Buffers must be uint8, got background {background.dtype} and overlay {overlay.dtype}"
        )

    if background.ndim != 3 or background.shape[2] not in (3, 4):
        raise InvalidArgument(f"Background must be RGB or RGBA, got shape {background.shape}")
    if overlay.ndim != 3 or overlay.shape[2] != 4:
        raise InvalidArgument(f"Overlay must be RGBA, got shape {overlay.shape}")
    if background.shape[:2] != overlay.shape[:2]:
        raise DimensionMismatch(
            f"Background is {background.shape[1]}x{background.shape[0]} "
            f"but overlay is {overlay.shape[1]}x{overlay.shape[0]}"
        )

    alpha = overlay[..., 3:4].astype(np.float32) / 255.0
    over = overlay[..., :3].astype(np.float32) * alpha + background[..., :3].astype(np.float32) * (1 - alpha)

    frame = background.copy()
    frame[..., :3] = np.clip(np.rint(over), 0, 255).astype(np.uint8)
    return frame
