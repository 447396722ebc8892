import threading

import numpy as np

from heatoverlay.utils.config import (GRADIENT_WIDTH, PALETTE, TABLE_SIZE, TABLE_ALPHA,
                                      DOT_DIAMETER, CLICK_ALPHA, HEAT_BASELINE)
from .errors import InvalidArgument
from .gradient import generate_gradient
from .color_table import build_color_table
from .stamp import generate_radial_stamp
from .heat_buffer import HeatBuffer
from .compositor import colorize, compose


class HeatmapOverlay:
    """
    A heat map drawn over a background image.

    The lookup table and the dot are built once here; every add_dot() paints
    into the heat buffer and every render() recolors it from scratch.
    """
    def __init__(self, background, palette=PALETTE, gradient_width=GRADIENT_WIDTH,
                 table_size=TABLE_SIZE, table_alpha=TABLE_ALPHA,
                 dot_diameter=DOT_DIAMETER, click_alpha=CLICK_ALPHA, baseline=HEAT_BASELINE):
        background = np.asarray(background)
        if background.ndim != 3 or background.shape[2] not in (3, 4):
            raise InvalidArgument(f"Background must be RGB or RGBA, got shape {background.shape}")
        if background.dtype != np.uint8:
            raise InvalidArgument(f"Background must be uint8, got {background.dtype}")

        self.background = background.copy()
        self.background.setflags(write=False)
        self.height, self.width = background.shape[:2]
        self.click_alpha = click_alpha

        strip = generate_gradient(gradient_width, palette)
        self.color_table = build_color_table(strip, table_size, table_alpha)
        self.dot = generate_radial_stamp(dot_diameter)
        self.heat = HeatBuffer(self.width, self.height, baseline)

        self.click_count = 0
        self._lock = threading.Lock()

    def add_dot(self, x, y, alpha=None):
        """Deposits one dot of heat centered at (x, y)."""
        if alpha is None:
            alpha = self.click_alpha
        with self._lock:
            self.heat.stamp(x, y, self.dot, alpha)
            self.click_count += 1

    def get_heatmap_image(self):
        """Returns the colorized heat map (RGBA) without the background."""
        with self._lock:
            return colorize(self.heat, self.color_table)

    def render(self):
        """Returns the background with the colorized heat map composited on top."""
        return compose(self.background, self.get_heatmap_image())

    def peak(self):
        with self._lock:
            return self.heat.peak()
