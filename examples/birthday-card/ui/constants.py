"""Layout constants and color definitions."""

SCREEN_W = 900
SCREEN_H = 600

# Projection
FOCAL = 520.0
HORIZON_Y = SCREEN_H * 0.55

# Text area
TEXT_X = 80
TEXT_Y = 120
LINE_H = 48

# Card
CARD_W = 360
CARD_H = 220

# Colors
BG_COLOR = (255, 240, 246)
BG_PHOTO = (60, 70, 95)
TEXT_COLOR = (60, 40, 60)
CAPTION_COLOR = (255, 255, 255)
CARD_BG = (255, 255, 255)
CARD_BORDER = (240, 150, 190)
MODEL_COLOR = (200, 160, 220)
PHOTO_COLOR = (230, 230, 230)

CAPTION_TEXT = "happy birthday!"
CARD_TEXT = "make a wish"
