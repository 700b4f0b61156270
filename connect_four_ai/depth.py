from .board import Board
from .constants import ENDGAME_MOVES, MIN_ADAPTIVE_DEPTH, OPENING_MOVES
from .piece import Piece


def adaptive_depth(board: Board, base_depth: int) -> int:
    """
    Return the search depth to use for this board.

    Searches deeper when either side threatens an immediate win or the board is nearly full,
    and shallower during the opening.
    """
    threats = board.count_immediate_wins(Piece.BLUE) + board.count_immediate_wins(Piece.RED)
    if threats >= 2:
        return base_depth + 2
    if threats == 1:
        return base_depth + 1

    moves_played = board.occupied_count()
    if moves_played < OPENING_MOVES:
        return max(MIN_ADAPTIVE_DEPTH, base_depth - 1)
    if moves_played > ENDGAME_MOVES:
        return base_depth + 1
    return base_depth
