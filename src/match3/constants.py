# ============================================================================
# BOARD
# ============================================================================
GRID_SIZE = 9
INITIAL_MOVES = 30

# Number of token kinds in play (1-8). Fewer kinds make matching easier.
TOKEN_VARIETY = 6


# ============================================================================
# GENERATION
# ============================================================================
# Whole-board regeneration attempts before the last board is accepted as is.
MAX_GENERATION_ATTEMPTS = 100
# Per-cell redraws while a placement would complete a run of three.
MAX_PLACEMENT_REDRAWS = 50


# ============================================================================
# SCORING
# ============================================================================
MATCH_POINTS = {3: 100, 4: 200, 5: 400}
EXTRA_TILE_POINTS = 150          # per tile beyond five
CASCADE_MULTIPLIERS = (1.0, 1.25, 1.5, 1.75, 2.0)   # index = step - 1, last value caps
LINE_CLEAR_BONUS = 150
BOMB_BONUS = 250


# ============================================================================
# RESOLUTION
# ============================================================================
# Cascade steps resolved for one swap before the board is regenerated instead.
MAX_CASCADE_STEPS = 100
