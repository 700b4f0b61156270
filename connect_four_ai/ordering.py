"""Move ordering: rank the playable columns so that alpha-beta pruning sees the strongest moves first."""
from .board import Board
from .constants import (
    CENTER_COLUMN,
    COLUMNS,
    NOT_FOUND,
    ORDER_BUILDING_BONUS,
    ORDER_CENTER_BIAS,
    ORDER_CENTER_STEP,
    ROWS,
    WIN_SCORE,
)
from .evaluation import evaluate
from .piece import Piece


def move_order_score(board: Board, col: int, side: Piece) -> int:
    """
    Return the ordering score of dropping the side's piece into the column.

    The board is restored before returning. The column must not be full.
    """
    row = board.drop(col, side)
    if board.has_line(side):
        score = WIN_SCORE
    else:
        score = evaluate(board, side)
    board.undo(row, col)

    score += ORDER_CENTER_BIAS - abs(col - CENTER_COLUMN) * ORDER_CENTER_STEP
    # Stacking on our own piece.
    if row < ROWS - 1 and board.grid[row + 1][col] is side:
        score += ORDER_BUILDING_BONUS
    return score


def ordered_moves(board: Board, side: Piece) -> list[int]:
    """
    Return every playable column, best first for the side to move.

    Columns with equal scores keep their left-to-right order. No playable column is ever left out.
    """
    scored = []
    for col in range(COLUMNS):
        if board.lowest_open_row(col) == NOT_FOUND:
            continue
        scored.append((col, move_order_score(board, col, side)))
    scored.sort(key=lambda move: move[1], reverse=True)
    return [col for col, _ in scored]
