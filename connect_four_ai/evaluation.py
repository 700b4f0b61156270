"""Static evaluation of a board: center control plus a score for every group of four cells."""
from .board import Board
from .constants import (
    ADJACENT_CENTER_BONUS,
    CENTER_BONUS,
    CENTER_COLUMN,
    CONNECTED_TWO_SCORE,
    OPEN_THREE_SCORE,
    OPPONENT_OPEN_THREE_PENALTY,
    OPPONENT_THREE_PENALTY,
    OPPONENT_TWO_PENALTY,
    ROWS,
    SPLIT_TWO_SCORE,
    THREE_SCORE,
    WIN_SCORE,
)
from .piece import Piece


def evaluate_window(cells: list[Piece], piece: Piece) -> int:
    """
    Return the score of a single group of four cells from the point of view of the provided piece.

    Threes count as "open" only when both ends of the window are empty. With three pieces and a single gap
    that can never happen, so open threes are effectively never rewarded; the weights were tuned with that behaviour.
    """
    own = cells.count(piece)
    empty = cells.count(Piece.EMPTY)
    opponent = len(cells) - own - empty
    both_ends_open = cells[0] is Piece.EMPTY and cells[-1] is Piece.EMPTY

    if own == 4:
        return WIN_SCORE

    score = 0
    # Offense
    if own == 3 and empty == 1:
        score += OPEN_THREE_SCORE if both_ends_open else THREE_SCORE
    elif own == 2 and empty == 2:
        connected = any(cells[i] is piece and cells[i + 1] is piece for i in range(len(cells) - 1))
        score += CONNECTED_TWO_SCORE if connected else SPLIT_TWO_SCORE

    # Defense
    if opponent == 3 and empty == 1:
        score -= OPPONENT_OPEN_THREE_PENALTY if both_ends_open else OPPONENT_THREE_PENALTY
    elif opponent == 2 and empty == 2:
        score -= OPPONENT_TWO_PENALTY

    return score


def evaluate(board: Board, piece: Piece) -> int:
    """Return how good the board is for the provided piece. Higher is better; an empty board scores 0."""
    score = 0
    grid = board.grid

    # Center control: one bonus per row for the center column and one for either of its neighbours.
    for r in range(ROWS):
        if grid[r][CENTER_COLUMN] is piece:
            score += CENTER_BONUS
        if grid[r][CENTER_COLUMN - 1] is piece or grid[r][CENTER_COLUMN + 1] is piece:
            score += ADJACENT_CENTER_BONUS

    for cells in board.windows():
        score += evaluate_window(cells, piece)
    return score
