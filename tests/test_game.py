import random

import pytest

from triquigo.board import Board, Mark
from triquigo.game import Game, GameMode, GameStatus, parse_cell_index

X, O, EMPTY, BLOCKED = Mark.X, Mark.O, Mark.EMPTY, Mark.BLOCKED
_ = EMPTY


def test_parse_cell_index_digit():
    assert parse_cell_index("5") == 5
    assert parse_cell_index("7abc") == 7


@pytest.mark.parametrize("text", ["", "a", "/", ":"])
def test_parse_cell_index_rejects(text):
    with pytest.raises(ValueError):
        parse_cell_index(text)


def test_mode_values():
    assert GameMode("tradicional") is GameMode.TRADITIONAL
    assert GameMode("sincronizado") is GameMode.SYNCHRONIZED


def test_new_game_is_in_play():
    game = Game()
    assert game.status is GameStatus.IN_PLAY
    assert game.board == Board()
    assert game.mode is GameMode.TRADITIONAL


def test_traditional_move_adds_one_x_and_one_o():
    game = Game(rng=random.Random(1))
    status = game.play_traditional(4)
    assert status is GameStatus.IN_PLAY
    assert game.board[4] is X
    cells = list(game.board)
    assert cells.count(X) == 1
    assert cells.count(O) == 1


def test_traditional_win_skips_computer_move():
    game = Game()
    game.board = Board([X, X, _, O, O])
    assert game.play_traditional(2) is GameStatus.WON
    assert list(game.board).count(O) == 2


def test_traditional_draw_when_board_full():
    game = Game()
    game.board = Board([X, O, X, X, O, O, O, X, _])
    assert game.play_traditional(8) is GameStatus.DRAW
    assert game.board.available() == []


def test_traditional_loss():
    game = Game()
    game.board = Board([O, O, _, X, X, O, O, X, _])
    assert game.play_traditional(8) is GameStatus.LOST
    assert game.board[2] is O


def test_reset_clears_state():
    game = Game()
    game.board = Board([X, X, _])
    game.play_traditional(2)
    game.reset()
    assert game.status is GameStatus.IN_PLAY
    assert game.board == Board()
    assert game.winning_board == Board()


def test_synchronized_same_cell_blocks():
    game = Game(GameMode.SYNCHRONIZED)
    assert game.play_synchronized(0) is GameStatus.IN_PLAY
    assert game.board[0] is BLOCKED
    game.play_synchronized(0)
    assert game.board[0] is X
    assert game.board[1] is O


def test_synchronized_block_on_last_cell_is_draw():
    game = Game(GameMode.SYNCHRONIZED)
    game.board = Board([X, O, X, X, O, O, O, X, _])
    assert game.play_synchronized(8) is GameStatus.DRAW
    assert game.board[8] is BLOCKED


def test_synchronized_win():
    game = Game(GameMode.SYNCHRONIZED)
    game.board = Board({2: X, 4: X})
    assert game.play_synchronized(6) is GameStatus.WON
    assert game.board[0] is O
    assert [game.winning_board[i] for i in (2, 4, 6)] == [X, X, X]


def test_synchronized_loss():
    game = Game(GameMode.SYNCHRONIZED)
    game.board = Board([_, O, O])
    assert game.play_synchronized(8) is GameStatus.LOST
    assert [game.winning_board[i] for i in (0, 1, 2)] == [O, O, O]


def test_synchronized_simultaneous_lines_are_cleared():
    game = Game(GameMode.SYNCHRONIZED)
    game.board = Board([_, O, O, X, X, _])
    assert game.play_synchronized(5) is GameStatus.IN_PLAY
    assert game.board == Board()
    expected = Board()
    expected.fill_trio((3, 4, 5), X)
    expected.fill_trio((0, 1, 2), O)
    assert game.winning_board == expected


def test_synchronized_move_resets_winning_board():
    game = Game(GameMode.SYNCHRONIZED)
    game.winning_board = Board([X, X, X])
    game.play_synchronized(4)
    assert game.winning_board == Board()