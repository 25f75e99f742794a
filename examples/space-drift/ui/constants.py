"""Layout constants and color definitions."""

TITLE = "Space Drift"

# Starfield
STAR_COUNT = 120
STAR_MIN_RADIUS = 1
STAR_MAX_RADIUS = 2

# Colors
BG_CENTER = (45, 51, 66)
BG_EDGE = (0, 0, 0)
STAR_COLOR = (90, 100, 120)
TEXT_COLOR = (197, 198, 199)
TEXT_DIM = (120, 120, 140)
TITLE_COLOR = (102, 252, 241)
GAMEOVER_COLOR = (255, 0, 85)
NOSE_COLOR = (11, 12, 16)
CHASER_CORE = (255, 255, 255)

# HUD
HUD_PAD = 16
HUD_LINE_H = 22

# Audio
SAMPLE_RATE = 22050
VOLUME = 0.25
PENTATONIC = (261.63, 293.66, 329.63, 392.00, 440.00, 523.25)
