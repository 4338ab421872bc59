"""Window, timing, and palette constants."""

# Timing
FPS = 60
TPS = 20

# Initial window; resizable at runtime
SCREEN_W = 1280
SCREEN_H = 720

# Scene delays, in ticks
SPLASH_DELAY_TICKS = 14  # 0.7 s for the click feedback before the intro
INTRO_TICKS = 160  # 8 s stand-in for the intro video

# Puzzle geometry, world units at scale_factor 1.0
CATALYST_SIZE = 1.2
ECHO_SIZE = 0.5
ECHO_LABEL_GAP = 0.25

# Colors
BG_SPLASH = (8, 8, 14)
BG_INTRO = (0, 0, 0)
BG_ALTAR = (16, 5, 33)
BG_BRIEFING = (5, 5, 10)
BG_PUZZLE = (5, 5, 10)
ALTAR_STONE = (48, 36, 70)
ALTAR_EDGE = (90, 70, 130)
TEXT_COLOR = (235, 235, 240)
TEXT_DIM = (170, 170, 170)
SPLASH_ACCENT = (209, 255, 80)
BUTTON_ACCENT = (80, 217, 255)
BRIEFING_GLOW = (0, 255, 255)
STATUS_COLOR = (120, 255, 160)
