"""Line counting for the score attack mode, where play continues until the board is full."""
from .board import Board
from .constants import COLUMNS, ROWS, WINDOW_LENGTH
from .piece import Piece


def streak_points(cells: list[Piece], piece: Piece) -> int:
    """Return the points for a row or column: every run of L >= 4 pieces is worth L - 3."""
    points = 0
    streak = 0
    for cell in cells + [Piece.EMPTY]:
        if cell is piece:
            streak += 1
            continue
        if streak >= WINDOW_LENGTH:
            points += streak - (WINDOW_LENGTH - 1)
        streak = 0
    return points


def final_score(board: Board, piece: Piece) -> int:
    """
    Return the score attack total for the piece.

    Rows and columns are scored by streak length, so a run of five counts as two overlapping lines.
    Diagonals are checked one group of four at a time and each complete group counts once.
    """
    grid = board.grid
    score = 0
    for r in range(ROWS):
        score += streak_points(grid[r], piece)
    for c in range(COLUMNS):
        score += streak_points([grid[r][c] for r in range(ROWS)], piece)

    span = WINDOW_LENGTH - 1
    for r in range(ROWS - span):
        for c in range(COLUMNS - span):
            # Down-right.
            if all(grid[r + j][c + j] is piece for j in range(WINDOW_LENGTH)):
                score += 1
    for r in range(span, ROWS):
        for c in range(COLUMNS - span):
            # Up-right.
            if all(grid[r - j][c + j] is piece for j in range(WINDOW_LENGTH)):
                score += 1
    return score
