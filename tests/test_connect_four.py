"""Tests for the ConnectFour game loop."""

import pytest

from connect_four_ai import errors
from connect_four_ai.board import Board
from connect_four_ai.connect_four import ConnectFour, GameMode, prompt_for_int
from connect_four_ai.constants import NO_MOVE, Difficulty
from connect_four_ai.logger import Logger
from connect_four_ai.piece import Piece


def feed_input(monkeypatch, answers):
    """Replace input() with a function returning the given answers in order."""
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda *args: next(it))


def test_game_initialization():
    game = ConnectFour()
    assert game.mode is GameMode.CLASSIC
    assert game.players == 1
    assert game.difficulty is Difficulty.MEDIUM
    assert game.board == Board()
    assert game.human_pieces() == [Piece.RED]
    assert game.current_piece() is Piece.RED


def test_invalid_number_of_players():
    with pytest.raises(errors.InvalidChoiceError):
        ConnectFour(players=3)


def test_insert_alternates_turns():
    game = ConnectFour(players=2)
    assert game.insert(3) == 5
    assert game.board[5, 3] is Piece.RED
    assert game.current_piece() is Piece.BLUE
    assert game.insert(3) == 4
    assert game.board[4, 3] is Piece.BLUE


def test_insert_errors():
    game = ConnectFour(players=2)
    for _ in range(6):
        game.insert(0)
    with pytest.raises(errors.InvalidInsertError):
        game.insert(0)
    with pytest.raises(errors.OutOfBoundsError):
        game.insert(7)


def test_obvious_move_prefers_leftmost_win_or_block():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "....OOO",
        "XXX.XXO",
    ])
    game = ConnectFour(board=board)
    # Column 3 is the first column that completes a line for either side: it blocks RED on the bottom row.
    assert game.obvious_move(Piece.BLUE) == 3


def test_obvious_move_none():
    assert ConnectFour().obvious_move(Piece.BLUE) == NO_MOVE


def test_get_best_move_wins_immediately(blue_open_three):
    game = ConnectFour(board=blue_open_three)
    assert game.get_best_move(Piece.BLUE) == 0


def test_get_best_move_uses_the_engine_in_score_attack(one_column_left):
    game = ConnectFour(mode=GameMode.SCORE_ATTACK, board=one_column_left, difficulty=Difficulty.EASY)
    assert game.get_best_move(Piece.BLUE) == 6


def test_get_best_move_on_full_board(full_board):
    game = ConnectFour(board=full_board)
    with pytest.raises(errors.BoardFullError):
        game.get_best_move()


def test_classic_game_over_and_result(blue_open_three):
    blue_open_three.drop(4, Piece.BLUE)
    game = ConnectFour(board=blue_open_three)
    assert game.game_over()
    assert game.winner is Piece.BLUE
    assert len(game.winning_group) == 4
    assert game.scores() == {Piece.RED: 0, Piece.BLUE: 1}
    assert game.result_message() == "AI WINS!"


def test_score_attack_continues_after_a_line():
    board = Board.from_rows(["......."] * 5 + ["OOOOO.."])
    game = ConnectFour(mode=GameMode.SCORE_ATTACK, players=2, board=board)
    assert not game.game_over()
    assert game.scores() == {Piece.RED: 0, Piece.BLUE: 2}
    assert game.result_message() == "FINAL SCORE: X=0 | O=2\nPLAYER O WINS!"


def test_full_board_is_a_draw(full_board):
    game = ConnectFour(board=full_board)
    assert game.game_over()
    assert game.winner is Piece.EMPTY
    assert game.result_message() == "DRAW! Board is full."


def test_highlighted_str():
    game = ConnectFour(mode=GameMode.SCORE_ATTACK)
    game.insert(3)
    text = game.highlighted_str([(5, 3)])
    assert "=== SCORE ATTACK ===" in text
    assert "1    2    3    4    5    6    7" in text
    assert "▓▓" in text
    assert "██" not in text


def test_two_player_game(monkeypatch, capsys):
    # Invalid answers are rejected until a usable column is given.
    feed_input(monkeypatch, ["abc", "8", "1", "2", "1", "2", "1", "2", "1"])
    game = ConnectFour(players=2)
    assert game.play()
    assert game.winner is Piece.RED
    assert game.result_message() == "PLAYER X WINS!"
    out = capsys.readouterr().out
    assert "Game finished!" in out
    assert "not a valid option" in out


def test_full_column_is_reprompted(monkeypatch, capsys):
    feed_input(monkeypatch, ["1"] * 7 + ["2"])
    game = ConnectFour(players=2)
    assert game.play(turns=7)
    assert game.board.occupied_count() == 7
    assert game.board[5, 1] is Piece.RED
    assert "is full" in capsys.readouterr().out


def test_ai_plays_both_sides():
    game = ConnectFour(players=0, difficulty=Difficulty.EASY)
    assert game.play(turns=4)
    assert game.board.occupied_count() == 4


def test_new_prompts_for_missing_options(monkeypatch):
    feed_input(monkeypatch, ["2", "x", "2", "3"])
    game = ConnectFour.new()
    assert game.mode is GameMode.SCORE_ATTACK
    assert game.players == 1
    assert game.difficulty is Difficulty.HARD


def test_new_skips_difficulty_for_two_humans(monkeypatch):
    feed_input(monkeypatch, ["1", "1"])
    game = ConnectFour.new()
    assert game.mode is GameMode.CLASSIC
    assert game.players == 2


def test_prompt_gives_up_after_too_many_attempts(monkeypatch):
    feed_input(monkeypatch, ["x"] * 5)
    with pytest.raises(errors.TooManyAttemptsError):
        prompt_for_int(Logger(), "? ", lambda n: True)
