"""The Board class holds a connect four grid and the gravity, undo and line-detection rules that apply to it."""
from typing import Iterable

from . import errors, utils
from .constants import COLUMNS, NOT_FOUND, ROWS, WINDOW_LENGTH
from .piece import Piece

# Base-3 digit for each piece in the packed board key.
KEY_DIGITS: dict[Piece, int] = {Piece.EMPTY: 0, Piece.RED: 1, Piece.BLUE: 2}
KEY_POWERS: list[list[int]] = [[3 ** (r * COLUMNS + c) for c in range(COLUMNS)] for r in range(ROWS)]


def get_windows() -> list[list[tuple[int, int]]]:
    """Return the (row, column) positions of every group of four adjacent cells on the board."""
    results = []
    for c in range(COLUMNS):
        # Whether or not there is sufficient room to the right of c to find a group of four.
        space_right = c <= COLUMNS - WINDOW_LENGTH
        for r in range(ROWS):
            # for down to up diagonals, we'll mirror r on the horizontal midpoint.
            opposite_r = ROWS - r - 1
            space_down = r <= ROWS - WINDOW_LENGTH
            space_up = opposite_r >= WINDOW_LENGTH - 1

            # | group that includes c.
            if space_down:
                results.append([(r + j, c) for j in range(WINDOW_LENGTH)])
            # - group that includes r.
            if space_right:
                results.append([(r, c + j) for j in range(WINDOW_LENGTH)])
            # \ diagonal group that includes r.
            if space_down and space_right:
                results.append([(r + j, c + j) for j in range(WINDOW_LENGTH)])
            # / diagonal group that includes opposite_r.
            if space_up and space_right:
                results.append([(opposite_r - j, c + j) for j in range(WINDOW_LENGTH)])
    return results


WINDOWS: list[list[tuple[int, int]]] = get_windows()


class Board:
    """
    A 6x7 connect four grid. Row 0 is the top row and row 5 is the bottom row.

    Pieces are only ever written to the lowest open cell of a column, so a cell below an occupied cell is never empty.
    The board keeps a packed integer key of its contents up to date on every write so that it can be used for caching.
    """

    rows: int = ROWS
    columns: int = COLUMNS

    def __init__(self, grid: list[list[Piece]] = None) -> None:
        self.grid: list[list[Piece]] = (
            [list(row) for row in grid] if grid is not None else [[Piece.EMPTY] * COLUMNS for _ in range(ROWS)]
        )
        self.key: int = 0
        for r in range(ROWS):
            for c in range(COLUMNS):
                self.key += KEY_DIGITS[self.grid[r][c]] * KEY_POWERS[r][c]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from text, top row first.

        Each row is seven characters: 'X' for RED, 'O' for BLUE and '.' or ' ' for an empty cell.
        """
        lookup = {"X": Piece.RED, "O": Piece.BLUE, ".": Piece.EMPTY, " ": Piece.EMPTY}
        grid = [[lookup[ch] for ch in row] for row in rows]
        if len(grid) != ROWS or any(len(row) != COLUMNS for row in grid):
            raise ValueError(f"from_rows(): expected {ROWS} rows of {COLUMNS} cells.")
        return cls(grid)

    def copy(self) -> "Board":
        board = type(self).__new__(type(self))
        board.grid = [list(row) for row in self.grid]
        board.key = self.key
        return board

    def __getitem__(self, position: tuple[int, int]) -> Piece:
        r, c = position
        return self.grid[r][c]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        return "\n".join("".join(p.value if p is not Piece.EMPTY else "." for p in row) for row in self.grid)

    def __repr__(self) -> str:
        """Return a string representing every occupied position and piece on the board."""
        result = []
        for r in range(ROWS):
            for c in range(COLUMNS):
                if self.grid[r][c] is not Piece.EMPTY:
                    result.append(f"{r}{c}{self.grid[r][c].value}")
        return ",".join(result)

    # region Column and Row Interactions
    def _check_column(self, col: int) -> None:
        if col not in range(COLUMNS):
            raise errors.OutOfBoundsError(f"Column {utils.one_index(col)} is out of bounds.")

    def lowest_open_row(self, col: int) -> int:
        """Return the lowest empty row index in the column, or NOT_FOUND if the column is full."""
        self._check_column(col)
        for r in range(ROWS - 1, -1, -1):
            if self.grid[r][col] is Piece.EMPTY:
                return r
        return NOT_FOUND

    def drop(self, col: int, piece: Piece) -> int:
        """Write the piece into the lowest open cell of the column and return its row, or NOT_FOUND if it is full."""
        row = self.lowest_open_row(col)
        if row != NOT_FOUND:
            self.grid[row][col] = piece
            self.key += KEY_DIGITS[piece] * KEY_POWERS[row][col]
        return row

    def place(self, col: int, piece: Piece) -> bool:
        """Return True if the piece was dropped into the column, or False (without changes) if the column is full."""
        return self.drop(col, piece) != NOT_FOUND

    def undo(self, row: int, col: int) -> None:
        """Reset a cell written by drop() back to EMPTY."""
        self.key -= KEY_DIGITS[self.grid[row][col]] * KEY_POWERS[row][col]
        self.grid[row][col] = Piece.EMPTY

    def available_columns(self) -> list[int]:
        """Return the indexes of the columns that are not yet full, left to right."""
        return [c for c in range(COLUMNS) if self.grid[0][c] is Piece.EMPTY]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not Piece.EMPTY for c in range(COLUMNS))

    def occupied_count(self) -> int:
        return sum(1 for row in self.grid for p in row if p is not Piece.EMPTY)

    def empty_count(self) -> int:
        return ROWS * COLUMNS - self.occupied_count()

    # endregion

    # region Lines
    def windows(self) -> Iterable[list[Piece]]:
        """Yield the contents of every group of four adjacent cells."""
        grid = self.grid
        for window in WINDOWS:
            yield [grid[r][c] for r, c in window]

    def winning_window(self, piece: Piece) -> list[tuple[int, int]]:
        """Return the positions of the first group of four owned by the piece, or an empty list."""
        grid = self.grid
        for window in WINDOWS:
            if all(grid[r][c] is piece for r, c in window):
                return window
        return []

    def has_line(self, piece: Piece) -> bool:
        """Return True if the piece owns four adjacent cells horizontally, vertically or diagonally."""
        return len(self.winning_window(piece)) > 0

    def count_immediate_wins(self, piece: Piece) -> int:
        """Return how many columns would complete a line for the piece if it were dropped there next."""
        threats = 0
        for col in range(COLUMNS):
            row = self.drop(col, piece)
            if row == NOT_FOUND:
                continue
            if self.has_line(piece):
                threats += 1
            self.undo(row, col)
        return threats

    # endregion
