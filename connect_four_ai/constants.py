"""Board dimensions, scoring weights and search limits shared by the engine and the game."""
from enum import IntEnum

# region Board
ROWS = 6
COLUMNS = 7
CENTER_COLUMN = COLUMNS // 2
WINDOW_LENGTH = 4
NOT_FOUND = -1
# endregion

# region Scores
WIN_SCORE = 1000000
# Root scores above this mean a forced win was found and the remaining root moves are skipped.
FORCED_WIN_THRESHOLD = 900000

CENTER_BONUS = 200
ADJACENT_CENTER_BONUS = 100

OPEN_THREE_SCORE = 5000
THREE_SCORE = 150
SPLIT_TWO_SCORE = 60
CONNECTED_TWO_SCORE = 50
OPPONENT_OPEN_THREE_PENALTY = 10000
OPPONENT_THREE_PENALTY = 500
OPPONENT_TWO_PENALTY = 50

ORDER_CENTER_BIAS = 30
ORDER_CENTER_STEP = 10
ORDER_BUILDING_BONUS = 40
# endregion

# region Search
NO_MOVE = -1
MAX_CACHE_SIZE = 2000000
MIN_ADAPTIVE_DEPTH = 3
OPENING_MOVES = 8
ENDGAME_MOVES = 30
# endregion


class Difficulty(IntEnum):
    """AI difficulty tiers. The value is the base search depth."""
    EASY = 2
    MEDIUM = 4
    HARD = 6
    EXPERT = 7
