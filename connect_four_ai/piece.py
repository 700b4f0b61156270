from enum import Enum
from sys import intern


class Piece(Enum):
    """
    A connect four game piece. RED is represented by 'X' and BLUE is represented by 'O'.

    RED is the human (first) player. BLUE is the AI and the side the search engine maximizes.
    """
    EMPTY = intern(" ")
    RED = intern("X")
    BLUE = intern("O")

    def __str__(self) -> str:
        return f'{self.name} ({self.value})'

    def __repr__(self) -> str:
        return self.value

    def opponent(self) -> "Piece":
        """Return the other player's piece. EMPTY has no opponent and returns EMPTY."""
        if self is Piece.RED:
            return Piece.BLUE
        if self is Piece.BLUE:
            return Piece.RED
        return Piece.EMPTY
