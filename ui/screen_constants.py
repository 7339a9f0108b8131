"""
UI constants for the menu, battle and outcome screens.
"""

# ============================================================================
# Base Colors
# ============================================================================
COLOR_TITLE = (0, 255, 231)
COLOR_SUBTITLE = (230, 230, 190)
COLOR_TEXT = (230, 230, 230)
COLOR_TEXT_DIM = (170, 170, 170)
COLOR_FOOTER = (150, 150, 150)
COLOR_GOLD = (255, 220, 130)

# Background colors
COLOR_BG_PANEL = (25, 25, 35, 240)
COLOR_BAR_BACK = (40, 40, 55)
COLOR_BORDER_BRIGHT = (150, 170, 200)

# Selection colors
COLOR_SELECTED_BG = (70, 70, 100, 220)
COLOR_SELECTED_TEXT = (255, 255, 210)

# Accent colors
COLOR_ACCENT_DANGER = (255, 120, 120)

# Gradient colors (for backgrounds)
COLOR_GRADIENT_START = (30, 35, 50)
COLOR_GRADIENT_END = (20, 25, 35)

# ============================================================================
# Layout
# ============================================================================
MARGIN_X = 40
MARGIN_Y_TOP = 30
MARGIN_Y_FOOTER = 40
LINE_HEIGHT_SMALL = 22
LINE_HEIGHT_MEDIUM = 30

HEALTH_BAR_WIDTH = 300
HEALTH_BAR_HEIGHT = 18
PROGRESS_BAR_HEIGHT = 8
SNIPPET_PANEL_HEIGHT = 140

# Fonts
FONT_MONO = "consolas,dejavusansmono,couriernew,monospace"
FONT_EMOJI = "segoeuiemoji,notocoloremoji,applecoloremoji,symbola"

# Shadows
COLOR_SHADOW = (0, 0, 0, 180)
SHADOW_OFFSET_X = 2
SHADOW_OFFSET_Y = 2
