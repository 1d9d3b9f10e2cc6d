FRAMERATE = 60
DEFAULT_WINDOW_SIZE = 960, 640

BM = 20 # big margin

QUIT_BUTTON_SIZE = 40, 40

# colors
BACKGROUND_COLOR_HEX = '#16213e'
PLAYER_COLOR_HEX = '#4ecca3'
PLAYER_DETAIL_COLOR_HEX = '#355c7d'
PLAYER_INDICATOR_COLOR_HEX = '#f8b500'
HEALTH_HIGH_COLOR_HEX = '#4ecca3'
HEALTH_MEDIUM_COLOR_HEX = '#ff9a3c'
HEALTH_LOW_COLOR_HEX = '#ff6b6b'

# background grid
GRID_SPACING = 50
GRID_ALPHA = 13 # ~5% opacity

# projectile trail, fixed color whatever the projectile looks like
TRAIL_COLOR_HEX = '#ff9a3c'
TRAIL_RADIUS_MULT = 0.7
TRAIL_ALPHA = 128

# player drawing
PLAYER_DETAIL_INSET = 5
PLAYER_INDICATOR_RADIUS = 5
PLAYER_INDICATOR_OFFSET = 5
PLAYER_BOB_AMPLITUDE = 3.
PLAYER_BOB_PERIOD_DIVISOR = 100. # milliseconds per radian

# HUD
HEALTH_BAR_POS = 20, 20
HEALTH_BAR_SIZE = 200, 20
HEALTH_BAR_BORDER = 2
HEALTH_TEXT_SIZE = 14
DEBUG_TEXT_SIZE = 12
DEBUG_LINE_OFFSETS = (60, 40, 20) # from the bottom of the screen
