BOARD_WIDTH = 12
BOARD_HEIGHT = 8

COLOR_COUNT = 6
SYMBOL_COUNT = 6
# Every (color, symbol) variant appears this many times in a full supply.
STONE_COPIES = 2
TOTAL_STONES = COLOR_COUNT * SYMBOL_COUNT * STONE_COPIES
# Number of decorative background variants per empty cell (cosmetic only).
BACKGROUND_VARIANTS = 4

# Points for a placement by number of non-trivial matches, before the streak multiplier.
MATCH_BASE_POINTS = {1: 1, 2: 2, 3: 4, 4: 8}
# Milestone bonus for the n-th four-way placement of a game (index n - 1).
FOURWAY_BONUSES = (25, 50, 100, 200, 400, 600, 800, 1000, 5000, 10000, 25000, 50000)
# End-of-game bonus indexed by the number of stones still left in the supply.
STONES_LEFT_BONUS = (1000, 500, 100)

# Idle time before the legal-cell overlay is revealed.
HINT_DELAY_SECONDS = 5.0

# Window and board geometry (pixels). The board sits at the top-left, the
# status panel fills the strip to its right.
TILE_WIDTH = 56
TILE_HEIGHT = 66
WINDOW_WIDTH = 788
WINDOW_HEIGHT = 528
STATUS_PANEL_LEFT = TILE_WIDTH * BOARD_WIDTH
STATUS_PANEL_CENTER_X = WINDOW_WIDTH - (WINDOW_WIDTH - STATUS_PANEL_LEFT) / 2
# New button footprint, centred on the status panel near the bottom edge.
NEW_BUTTON_WIDTH = 52
NEW_BUTTON_HEIGHT = 32
NEW_BUTTON_BOTTOM = 12
# Supply tally marks: rows of ten small bars stacked upward.
TALLY_PER_ROW = 10
TALLY_BAR_WIDTH = 5
TALLY_BAR_HEIGHT = 15
