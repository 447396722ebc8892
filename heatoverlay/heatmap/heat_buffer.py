import numpy as np

from .errors import InvalidArgument
from .stamp import VALUE, ALPHA


class HeatBuffer:
    """
    Per-pixel heat accumulator.

    Heat is stored as one 8-bit value per pixel. Values only ever go up
    through stamp(); nothing decays or clears them.
    """
    def __init__(self, width, height, baseline=0):
        if width < 1 or height < 1:
            raise InvalidArgument(f"Heat buffer needs positive dimensions, got {width}x{height}")
        if not 0 <= baseline <= 255:
            raise InvalidArgument(f"Baseline must be in [0, 255], got {baseline}")

        self.width = width
        self.height = height
        self.baseline = baseline
        self._accum = np.full((height, width), baseline, dtype=np.uint8)

    @property
    def values(self):
        """Read-only view of the accumulator, shape (height, width)."""
        view = self._accum.view()
        view.setflags(write=False)
        return view

    @property
    def shape(self):
        return self._accum.shape

    def peak(self):
        return int(self._accum.max())

    def stamp(self, cx, cy, dot, blend_alpha):
        """
        Paints the dot over the buffer, centered at (cx, cy).

        Each covered cell moves toward the dot's intensity by the dot's alpha
        times blend_alpha:
            dst' = dst + (value - dst) * (dot_alpha / 255 * blend_alpha)
        Parts of the dot outside the buffer are clipped.
        """
        dot = np.asarray(dot)
        if dot.ndim != 3 or dot.shape[2] != 2:
            raise InvalidArgument(f"Expected a (D, D, 2) dot, got shape {dot.shape}")

        blend_alpha = min(max(float(blend_alpha), 0.0), 1.0)
        if blend_alpha == 0.0:
            return

        dh, dw = dot.shape[:2]
        x = int(cx) - dw // 2
        y = int(cy) - dh // 2

        # Clip to buffer bounds
        x0 = max(0, x)
        y0 = max(0, y)
        x1 = min(self.width, x + dw)
        y1 = min(self.height, y + dh)
        if x0 >= x1 or y0 >= y1:
            return

        sub = dot[y0 - y:y1 - y, x0 - x:x1 - x]
        value = sub[..., VALUE].astype(np.float32)
        weight = sub[..., ALPHA].astype(np.float32) / 255.0 * blend_alpha

        region = self._accum[y0:y1, x0:x1]
        dst = region.astype(np.float32)
        blended = np.floor(dst + (value - dst) * weight)
        blended = np.clip(blended, 0, 255).astype(np.uint8)

        # Heat never goes down, even where the dot is dimmer than the cell
        np.maximum(region, blended, out=region)


def create_heat_buffer(width, height, baseline=0):
    return HeatBuffer(width, height, baseline)


def stamp(heat, x, y, dot, blend_alpha):
    heat.stamp(x, y, dot, blend_alpha)
