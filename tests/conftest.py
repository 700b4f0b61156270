import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect_four_ai.board import Board


# Rows alternate in pairs of columns so that no four cells in any direction share a piece.
NO_LINE_ROWS = [
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
]


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def full_board() -> Board:
    """A full board without a winner."""
    return Board.from_rows(NO_LINE_ROWS)


@pytest.fixture
def one_column_left() -> Board:
    """Every column except the last is full and the last has two empty cells."""
    rows = list(NO_LINE_ROWS)
    rows[0] = rows[0][:6] + "."
    rows[1] = rows[1][:6] + "."
    return Board.from_rows(rows)


@pytest.fixture
def blue_open_three() -> Board:
    """Three BLUE pieces on the bottom row with both ends open."""
    return Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".OOO...",
    ])
