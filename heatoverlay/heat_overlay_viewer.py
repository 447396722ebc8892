import sys
import os

import cv2

from heatoverlay.utils.config import WINDOW_NAME, BACKGROUND_PATH, SESSION_LOG_PATH
from heatoverlay.utils.image_loader import load_background
from heatoverlay.utils.logger import DataLogger
from heatoverlay.utils.drawing import to_display, draw_status_bar
from heatoverlay.heatmap.heatmap_overlay import HeatmapOverlay


class HeatOverlayViewer:
    def __init__(self, background_path):
        background = load_background(background_path)
        h, w = background.shape[:2]
        print(f"Background loaded: {w}x{h}")

        self.overlay = HeatmapOverlay(background)
        self.logger = DataLogger(filename=SESSION_LOG_PATH)
        self.dirty = True

    def on_click(self, x, y):
        self.overlay.add_dot(x, y)
        peak = self.overlay.peak()
        self.logger.log(x, y, self.overlay.click_alpha, peak)
        print(f"Heat at ({x}, {y}) | Clicks: {self.overlay.click_count} | Peak: {peak}")
        self.dirty = True

    def process_frame(self):
        """Render the current heat map as a BGR image ready for display"""
        display = to_display(self.overlay.render())
        return draw_status_bar(display, self.overlay.click_count, self.overlay.peak())

    def run(self):
        print("\n=== CONTROLS ===")
        print("  Left click: Add heat | q: Quit")
        print("================\n")

        def mouse_callback(event, x, y, flags, param):
            if event == cv2.EVENT_LBUTTONDOWN:
                self.on_click(x, y)

        cv2.namedWindow(WINDOW_NAME)
        cv2.setMouseCallback(WINDOW_NAME, mouse_callback)

        display = None
        while True:
            # Only recolor when heat changed
            if self.dirty:
                display = self.process_frame()
                self.dirty = False
            cv2.imshow(WINDOW_NAME, display)

            key = cv2.waitKey(20) & 0xFF
            if key == ord('q'):
                break

        cv2.destroyWindow(WINDOW_NAME)
        print(f"Session ended after {self.overlay.click_count} clicks. Log: {self.logger.filename}")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    background_path = argv[0] if argv else BACKGROUND_PATH

    if not os.path.exists(background_path):
        print(f"ERROR: Background image not found at {background_path}")
        return 1

    viewer = HeatOverlayViewer(background_path)
    viewer.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
