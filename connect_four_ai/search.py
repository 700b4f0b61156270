"""Minimax search with alpha-beta pruning, backed by a transposition cache owned by the engine."""
import math
from dataclasses import dataclass
from typing import Optional, Union

from codetiming import Timer

from .board import Board
from .constants import FORCED_WIN_THRESHOLD, MAX_CACHE_SIZE, NO_MOVE, WIN_SCORE
from .depth import adaptive_depth
from .evaluation import evaluate
from .logger import Logger, LogLevel
from .ordering import ordered_moves
from .piece import Piece

# The side whose score the search maximizes. Every static evaluation is made from its point of view.
MAXIMIZER = Piece.BLUE
MINIMIZER = Piece.RED

CacheKey = tuple[int, int, bool]


class TranspositionCache:
    """
    Memo table of (board key, depth remaining, maximizing) -> (best column, score).

    Entries are exact memoized results, not alpha-beta bounds. When the table reaches its size limit it is
    emptied completely instead of storing the new entry.
    """

    def __init__(self, max_size: int = MAX_CACHE_SIZE) -> None:
        self.max_size = max_size
        self.table: dict[CacheKey, tuple[int, int]] = {}
        self.hits = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self.table)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self.table

    def get(self, key: CacheKey) -> Optional[tuple[int, int]]:
        entry = self.table.get(key)
        if entry is not None:
            self.hits += 1
        return entry

    def put(self, key: CacheKey, entry: tuple[int, int]) -> None:
        if len(self.table) < self.max_size:
            self.table[key] = entry
        else:
            self.table.clear()
            self.evictions += 1

    def reset(self) -> None:
        self.table.clear()
        self.hits = 0
        self.evictions = 0


@dataclass
class SearchResult:
    column: int
    score: int
    depth: int
    nodes: int = 0
    cache_hits: int = 0

    @property
    def has_move(self) -> bool:
        return self.column != NO_MOVE


class SearchEngine:
    """
    SearchEngine picks moves with a depth-limited minimax search.

    BLUE is always the maximizing side and RED the minimizing side. The engine keeps its transposition cache
    between searches; call clear_cache() to start from an empty cache.

    Cache entries are keyed by position, depth and side to move only. Scores from classic and score attack searches
    are not told apart, so clear the cache before reusing an engine under the other rules.
    """

    def __init__(self, max_cache_size: int = MAX_CACHE_SIZE, log_level: Union[LogLevel, str] = LogLevel.NONE) -> None:
        self.log: Logger = Logger(log_level)
        self.cache = TranspositionCache(max_cache_size)
        self.nodes = 0

    def clear_cache(self) -> None:
        self.cache.reset()
        self.nodes = 0

    def best_move(
        self,
        board: Board,
        side: Piece = MAXIMIZER,
        depth: int = 4,
        score_attack: bool = False,
        adaptive: bool = True,
    ) -> SearchResult:
        """
        Return the best column for the side to move along with its score.

        Args:
            board (Board): The position to search. It is copied and never modified.
            side (Piece, optional): The side to move. Defaults to BLUE, the maximizing side.
            depth (int, optional): The base search depth, usually a Difficulty value. Defaults to 4.
            score_attack (bool, optional): Whether the game continues past the first line. Defaults to False.
            adaptive (bool, optional): Whether to adjust the depth with adaptive_depth(). Defaults to True.

        The column is NO_MOVE when the board has no playable column.
        """
        position = board.copy()
        search_depth = adaptive_depth(position, depth) if adaptive else depth
        maximizing = side is MAXIMIZER
        hits_before = self.cache.hits
        self.nodes = 0

        t = Timer(name=f"\tsearch(depth: {search_depth})", text="{name} took {:.3f}s", logger=self.log.debug)
        t.start()
        column, score = self.search(
            position,
            search_depth,
            -math.inf,
            math.inf,
            maximizing,
            score_attack,
            search_depth,
        )
        t.stop()

        result = SearchResult(
            column=column,
            score=score,
            depth=search_depth,
            nodes=self.nodes,
            cache_hits=self.cache.hits - hits_before,
        )
        self.log.debug(
            f"best_move: {repr(side)} column {column} score {score} depth {search_depth},",
            f"nodes: {result.nodes}, cache hits: {result.cache_hits}, cache size: {len(self.cache)}",
        )
        return result

    def search(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        score_attack: bool,
        original_depth: int,
    ) -> tuple[int, int]:
        """
        Return the best (column, score) for the side to move, searching `depth` plies ahead.

        The board is modified while searching and restored before returning.
        Positive scores favor BLUE. Wins score WIN_SCORE plus the depth remaining so faster wins are preferred.
        """
        self.nodes += 1
        key = (board.key, depth, maximizing)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if not score_attack:
            if board.has_line(MAXIMIZER):
                return NO_MOVE, WIN_SCORE + depth
            if board.has_line(MINIMIZER):
                return NO_MOVE, -WIN_SCORE - depth

        # Near the end of the board, search all the way to the last move.
        empty_cells = board.empty_count()
        if empty_cells <= original_depth * 2 and not score_attack:
            depth = empty_cells

        if depth == 0:
            return NO_MOVE, evaluate(board, MAXIMIZER)

        piece = MAXIMIZER if maximizing else MINIMIZER
        moves = ordered_moves(board, piece)
        if not moves:
            return NO_MOVE, 0

        best_col = moves[0]
        best_score = -math.inf if maximizing else math.inf
        for col in moves:
            row = board.drop(col, piece)
            _, score = self.search(board, depth - 1, alpha, beta, not maximizing, score_attack, original_depth)
            board.undo(row, col)
            if self.log.level >= LogLevel.VERBOSE:
                self.log.verbose(
                    "\t" * max(original_depth - depth, 0),
                    f"{repr(piece)} ({depth}) col {col} -> {score}, alpha: {alpha}, beta: {beta}",
                )

            if maximizing:
                if score > best_score:
                    best_score, best_col = score, col
                    # A forced win at the root is good enough; skip the remaining root moves.
                    if depth == original_depth and score > FORCED_WIN_THRESHOLD:
                        self.cache.put(key, (best_col, best_score))
                        return best_col, best_score
                alpha = max(alpha, best_score)
                if alpha >= beta:
                    break
            else:
                if score < best_score:
                    best_score, best_col = score, col
                beta = min(beta, best_score)
                if beta <= alpha:
                    break

        self.cache.put(key, (best_col, best_score))
        return best_col, best_score
