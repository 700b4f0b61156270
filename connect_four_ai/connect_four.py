"""The ConnectFour class allows users to create and configure an instance of single game of connect four that can be played."""
from enum import Enum
from typing import Callable, Union

from . import errors, utils
from .board import Board
from .constants import COLUMNS, NO_MOVE, NOT_FOUND, Difficulty
from .logger import Logger, LogLevel
from .piece import Piece
from .scoring import final_score
from .search import SearchEngine

# region Globals
MAX_ATTEMPTS = 5
ANSI_RED = "\033[31m"
ANSI_BLUE = "\033[34m"
ANSI_YELLOW = "\033[33m"
ANSI_RESET = "\033[0m"
PIECE_COLORS = {Piece.RED: ANSI_RED, Piece.BLUE: ANSI_BLUE}
# endregion


class GameMode(Enum):
    """CLASSIC ends on the first four in a row. SCORE_ATTACK plays until the board is full and counts lines."""
    CLASSIC = 1
    SCORE_ATTACK = 2

    @property
    def title(self) -> str:
        return self.name.replace("_", " ")


RULES = f"""
{ANSI_YELLOW}GAME RULES & MODES{ANSI_RESET}

{ANSI_RED}1. CLASSIC MODE{ANSI_RESET}
    - GOAL: Connect 4 pieces in a row.
    - ENDING: Game stops instantly on a win.

{ANSI_BLUE}2. SCORE ATTACK{ANSI_RESET}
    - GOAL: Get as many lines as possible.
    - ENDING: Game ends only when the board is full.
"""


class ConnectFour:
    """
    ConnectFour is a class dedicated to constructing and playing a game of connect four.

    RED (X) always moves first. With one human player the human plays RED and the AI plays BLUE (O);
    with no human players both sides are played by the search engine.
    """

    # region Attributes and Printing
    def __init__(
        self,
        mode: GameMode = GameMode.CLASSIC,
        players: int = 1,
        difficulty: Difficulty = Difficulty.MEDIUM,
        board: Board = None,
        log_level: Union[LogLevel, str] = LogLevel.NONE,
        engine: SearchEngine = None,
    ) -> None:
        """
        Initialize a ConnectFour game based on the configuration parameters provided.

        Args:
            mode (GameMode, optional): Classic or score attack rules. Defaults to GameMode.CLASSIC.
            players (int, optional): The number of human players (0, 1 or 2). Defaults to 1.
            difficulty (Difficulty, optional): The AI's base search depth. Defaults to Difficulty.MEDIUM.
            board (Board, optional): The initial game board. Defaults to an empty board.
            log_level (Union[LogLevel, str], optional): The log level for game logging. Defaults to LogLevel.NONE.
            engine (SearchEngine, optional): The engine used for AI moves. Defaults to a new engine.
        """
        if players not in (0, 1, 2):
            raise errors.InvalidChoiceError(f"{players} is not a valid number of players.")
        self.log: Logger = Logger(log_level)
        self.mode: GameMode = mode
        self.players: int = players
        self.difficulty: Difficulty = Difficulty(difficulty)
        self.board: Board = board or Board()
        self.engine: SearchEngine = engine or SearchEngine(log_level=self.log.level)
        self.winner: Piece = Piece.EMPTY
        self.winning_group: list[tuple[int, int]] = []

    @classmethod
    def new(cls, **kwargs) -> "ConnectFour":
        """
        Instantiate a new game, prompting for any of mode, players and difficulty that weren't provided.

        Use the built-in constructor if you are providing the configuration via code.
        """
        log = Logger(kwargs.get("log_level", LogLevel.NONE))
        if kwargs.get("mode") is None:
            kwargs["mode"] = prompt_for_mode(log)
        if kwargs.get("players") is None:
            kwargs["players"] = prompt_for_number_players(log)
        if kwargs.get("difficulty") is None:
            kwargs["difficulty"] = prompt_for_difficulty(log) if kwargs["players"] < 2 else Difficulty.MEDIUM
        return cls(**kwargs)

    @property
    def score_attack(self) -> bool:
        return self.mode is GameMode.SCORE_ATTACK

    def human_pieces(self) -> list[Piece]:
        if self.players == 2:
            return [Piece.RED, Piece.BLUE]
        if self.players == 1:
            return [Piece.RED]
        return []

    def current_piece(self) -> Piece:
        """Return the piece of the player whose turn it is. RED moves on even piece counts."""
        return Piece.RED if self.board.occupied_count() % 2 == 0 else Piece.BLUE

    def scores(self) -> dict[Piece, int]:
        """Return each player's score: line counts in score attack, otherwise 1 for the winner."""
        if self.score_attack:
            return {p: final_score(self.board, p) for p in (Piece.RED, Piece.BLUE)}
        return {p: int(self.winner is p) for p in (Piece.RED, Piece.BLUE)}

    def highlighted_str(self, highlight_positions: list[tuple[int, int]] = []) -> str:
        """Return a colored string representation of the board with an optional set of positions highlighted."""
        scores = self.scores()
        result = [
            f"=== {self.mode.title} ===",
            f"  {ANSI_RED}P1 (X): {scores[Piece.RED]}{ANSI_RESET}      {ANSI_BLUE}P2 (O): {scores[Piece.BLUE]}{ANSI_RESET}",
            "  " + "    ".join(str(utils.one_index(c)) for c in range(COLUMNS)),
            "┌" + "┬".join(["────"] * COLUMNS) + "┐",
        ]
        for r in range(self.board.rows):
            row = []
            for c in range(COLUMNS):
                piece = self.board[r, c]
                if piece is Piece.EMPTY:
                    row.append("    ")
                    continue
                block = "▓▓" if (r, c) in highlight_positions else "██"
                row.append(f" {PIECE_COLORS[piece]}{block}{ANSI_RESET} ")
            result.append("│" + "│".join(row) + "│")
            if r < self.board.rows - 1:
                result.append("├" + "┼".join(["────"] * COLUMNS) + "┤")
        result.append("└" + "┴".join(["────"] * COLUMNS) + "┘")
        return "\n".join(result) + "\n"

    def __str__(self) -> str:
        """Return a basic string representation of the board without any highlighted positions."""
        return self.highlighted_str()

    # endregion

    # region Column and Row Interactions
    def insert(self, col: int, player: Piece = None) -> int:
        """
        Return the row into which a piece has been inserted.

        If the column provided is invalid or full, an error will be raised.
        """
        if col not in range(COLUMNS):
            raise errors.OutOfBoundsError(f"insert(): column {utils.one_index(col)} is out of bounds.")
        if player is None:
            player = self.current_piece()
        row = self.board.drop(col, player)
        if row == NOT_FOUND:
            raise errors.InvalidInsertError(f"insert(): column {utils.one_index(col)} is full.")
        self.log.info(f"{player} played a piece in column {utils.one_index(col)}.")
        return row

    # endregion

    # region AI
    def obvious_move(self, player: Piece) -> int:
        """
        Return the first column (left to right) that wins for the player or blocks an opponent's immediate win.

        Returns NO_MOVE if there is no such column.
        """
        opponent = player.opponent()
        for col in self.board.available_columns():
            row = self.board.drop(col, player)
            wins = self.board.has_line(player)
            self.board.undo(row, col)
            if wins:
                return col
            row = self.board.drop(col, opponent)
            blocks = self.board.has_line(opponent)
            self.board.undo(row, col)
            if blocks:
                return col
        return NO_MOVE

    def get_best_move(self, player: Piece = None) -> int:
        """
        Return the best column for the current (or provided) player to insert their piece.

        In classic mode an immediate win or block is played without searching.
        Otherwise the search engine is consulted, falling back to the first available column if it finds no move.
        """
        if self.board.is_full():
            raise errors.BoardFullError("get_best_move: cannot evaluate the best move of a full board.")
        if player is None:
            player = self.current_piece()
        self.log.debug("get_best_move:", repr(player), f"difficulty {self.difficulty.name}")

        if not self.score_attack:
            col = self.obvious_move(player)
            if col != NO_MOVE:
                self.log.debug("\twin/block move:", col)
                return col

        result = self.engine.best_move(
            self.board,
            side=player,
            depth=int(self.difficulty),
            score_attack=self.score_attack,
        )
        if result.has_move:
            self.log.debug("\tsearch move:", result.column, f"({result.score})")
            return result.column

        col = self.board.available_columns()[0]
        self.log.debug("\tfallback move:", col)
        return col

    # endregion

    # region Game Completion
    def evaluate_board_win(self) -> Piece:
        """Determine if there is a winner, record the winning group and return the winning piece (or EMPTY)."""
        for piece in (Piece.RED, Piece.BLUE):
            group = self.board.winning_window(piece)
            if group:
                self.winner, self.winning_group = piece, group
                return piece
        self.winner, self.winning_group = Piece.EMPTY, []
        return Piece.EMPTY

    def game_over(self) -> bool:
        """Return True if the board is full, or (in classic mode) if somebody connected four."""
        if self.board.is_full():
            if not self.score_attack:
                self.evaluate_board_win()
            return True
        return not self.score_attack and self.evaluate_board_win() is not Piece.EMPTY

    def result_message(self) -> str:
        """Return the announcement for a finished game."""
        if self.score_attack:
            scores = self.scores()
            red, blue = scores[Piece.RED], scores[Piece.BLUE]
            message = f"FINAL SCORE: X={red} | O={blue}\n"
            if red > blue:
                return message + "PLAYER X WINS!"
            if blue > red:
                return message + ("AI WINS!" if self.players == 1 else "PLAYER O WINS!")
            return message + "DRAW!"
        if self.winner is Piece.BLUE and self.players == 1:
            return "AI WINS!"
        if self.winner is not Piece.EMPTY:
            return f"PLAYER {repr(self.winner)} WINS!"
        return "DRAW! Board is full."

    # endregion

    # region Turn Mechanics
    def play(self, turns: int = None) -> bool:
        """
        Play the game for the provided number of turns (or as many as remain if not provided).

        The game will prompt for moves if it is configured for human players,
        otherwise it will use self.get_best_move to play for non-human players.

        Returns True if the plays occurred successfully, or False if an AI move was rejected.
        """
        if turns is None:
            turns = self.board.rows * COLUMNS
        humans = self.human_pieces()

        self.log.normal(self)
        turn_counter = 0
        while not self.game_over() and turn_counter < turns:
            player = self.current_piece()
            if player in humans:
                col = self.prompt_for_column_choice(player)
            else:
                self.log.normal(f"AI is thinking (Depth {int(self.difficulty)})...")
                col = self.get_best_move(player)

            try:
                row = self.insert(col, player)
            except errors.Error as e:
                self.log.error(e)
                if player in humans:
                    self.log.normal("Please try again.")
                    continue
                return False
            turn_counter += 1
            self.log.normal(self.highlighted_str([(row, col)]))

        self.log.debug(f"play: finished playing {turn_counter} turns.")
        if self.game_over():
            self.log.normal(self.highlighted_str(self.winning_group))
            self.log.normal("Game finished!")
            self.log.normal(self.result_message())
        return True

    def prompt_for_column_choice(self, player: Piece) -> int:
        """Prompt the player for a column choice. Columns are one-indexed for ease of use."""
        number = prompt_for_int(
            self.log,
            f"{player}, please select a column number (1-{COLUMNS}):\n",
            lambda n: n in range(1, COLUMNS + 1),
            retries=None,
        )
        return utils.zero_index(number)

    # endregion


# region Prompts
def prompt_for_int(
    log: Logger,
    message: str,
    accept: Callable[[int], bool],
    retries: Union[int, None] = MAX_ATTEMPTS,
) -> int:
    """
    Prompt via stdin until the user enters an integer accepted by `accept`.

    Raises TooManyAttemptsError after `retries` rejected answers; pass None to keep asking forever.
    """
    attempt = 0
    while True:
        value = utils.parse_int(input(message))
        try:
            if value is None:
                raise errors.InvalidChoiceError("Invalid input. Please enter a number.")
            if not accept(value):
                raise errors.InvalidChoiceError(f"{value} is not a valid option.")
            return value
        except errors.InvalidChoiceError as e:
            attempt += 1
            log.normal(e)
            if retries is not None and attempt >= retries:
                raise errors.TooManyAttemptsError("Too many failed attempts") from e


def prompt_for_mode(log: Logger) -> GameMode:
    """Prompt for the rules to play by."""
    choice = prompt_for_int(log, "  1. CLASSIC MODE\n  2. SCORE ATTACK\n  Choice: ", lambda n: n in (1, 2))
    return GameMode(choice)


def prompt_for_number_players(log: Logger) -> int:
    """Prompt for human versus human or human versus AI."""
    choice = prompt_for_int(log, "  1. HUMAN VS HUMAN\n  2. HUMAN VS AI\n  Choice: ", lambda n: n in (1, 2))
    players = 2 if choice == 1 else 1
    log.info(f"{players} human players.")
    return players


def prompt_for_difficulty(log: Logger) -> Difficulty:
    """Prompt for the AI difficulty. Any number other than 1-3 selects EXPERT."""
    tiers = list(Difficulty)
    lines = [f"  {i + 1}. {d.name} (Depth {int(d)})" for i, d in enumerate(tiers)]
    choice = prompt_for_int(log, "\n".join(lines) + "\n  Choice: ", lambda n: True)
    return tiers[choice - 1] if choice in range(1, len(tiers)) else Difficulty.EXPERT


# endregion
