# settings.py

# Window / display
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 640
FPS = 60
TITLE = "Code Knight"

# Colors
COLOR_BG = (18, 18, 28)
COLOR_PLAYER = (0, 255, 153)
COLOR_ENEMY = (255, 77, 77)
COLOR_TYPED = (0, 255, 153)
COLOR_PENDING = (200, 200, 210)
COLOR_WRONG = (255, 77, 77)
COLOR_COMBO = (255, 224, 102)

# Player
MAX_PLAYER_HEALTH = 100
TIMEOUT_DAMAGE = 20  # player HP lost when the countdown expires

# Countdown: seconds of allowance per snippet character, capped
SECONDS_PER_CHAR = 2
MAX_TIME_LIMIT = 40

# Deferred actions (seconds)
SNIPPET_COMPLETE_DELAY = 0.5
MISTAKE_PENALTY_DELAY = 1.0

# Combo label shows at this streak and above
COMBO_STREAK_THRESHOLD = 10
