# System Config
WINDOW_NAME = "Heatmap"
BACKGROUND_PATH = "map.png"  # Image drawn below the heat map

# Gradient Config
GRADIENT_WIDTH = 64
# Colors (R, G, B) - coolest first, the strip wraps back to navy
PALETTE = [
    (0, 0, 51),       # Navy
    (0, 0, 255),      # Blue
    (0, 255, 255),    # Cyan
    (0, 178, 0),      # Dark green
    (255, 255, 0),    # Yellow
    (255, 0, 0),      # Red
    (255, 255, 255),  # White
]

# Lookup Table Config
TABLE_SIZE = 256
TABLE_ALPHA = 0.5  # Overlay transparency (0.0 to 1.0)

# Heat Config
DOT_DIAMETER = 96
CLICK_ALPHA = 0.75  # How strongly one click paints over existing heat
HEAT_BASELINE = 0   # 0 = no heat

# Text
COLOR_TEXT = (255, 255, 255)

# Session Log
SESSION_LOG_PATH = "heat_session_log.csv"
LOG_INTERVAL = 0.0  # Seconds between rows, 0 logs every click
