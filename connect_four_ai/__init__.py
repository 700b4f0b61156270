"""A connect four game with a minimax alpha-beta search engine."""
from .board import Board
from .connect_four import ConnectFour, GameMode
from .constants import NO_MOVE, Difficulty
from .piece import Piece
from .search import SearchEngine, SearchResult
