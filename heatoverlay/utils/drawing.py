import cv2

from .config import COLOR_TEXT


def draw_text(img, text, pos, color=COLOR_TEXT, scale=0.6, thickness=2):
    x, y = pos
    cv2.putText(img, text, (x, y), cv2.FONT_HERSHEY_SIMPLEX, scale, (0, 0, 0), thickness + 2)
    cv2.putText(img, text, (x, y), cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness)


def to_display(frame):
    """Convert an RGB or RGBA frame to BGR for cv2.imshow."""
    if frame.shape[2] == 4:
        return cv2.cvtColor(frame, cv2.COLOR_RGBA2BGR)
    return cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)


def draw_status_bar(frame, clicks, peak):
    """
    Draws a semi-transparent top bar with the click count and peak heat.
    frame: BGR image, modified in place
    """
    w = frame.shape[1]

    overlay = frame.copy()
    cv2.rectangle(overlay, (0, 0), (w, 40), (0, 0, 0), -1)
    cv2.addWeighted(overlay, 0.7, frame, 0.3, 0, frame)

    draw_text(frame, f"CLICKS: {clicks}", (10, 27))
    draw_text(frame, f"PEAK: {peak}", (160, 27))
    return frame
