"""
Tests for the TicTacToe logic modules.
Covers the win checker, move validator, game state, history and session.
"""

import pytest

from logic.board import Cell, EMPTY_BOARD, index_to_location, index_to_row_col, place
from logic.game_state import GameState
from logic.move_history import SortOrder, build_history
from logic.move_validator import MoveValidator
from logic.session import GameSession, GameStatus
from logic.win_checker import WinChecker, WinResult


def make_board(x_cells=(), o_cells=()):
    """Build a board with X and O on the given indices."""
    board = EMPTY_BOARD
    for index in x_cells:
        board = place(board, index, Cell.X)
    for index in o_cells:
        board = place(board, index, Cell.O)
    return board


def play(game, *indices):
    for index in indices:
        assert game.apply_move(index), f"move {index} was ignored"
    return game


# ==================== BOARD ====================

def test_board_coordinates():
    assert index_to_row_col(0) == (0, 0)
    assert index_to_row_col(5) == (1, 2)
    assert index_to_location(5) == (2, 3)
    assert index_to_location(8) == (3, 3)


def test_place_returns_new_board():
    board = place(EMPTY_BOARD, 4, Cell.O)
    assert board[4] == Cell.O
    assert EMPTY_BOARD[4] == Cell.EMPTY
    assert len(board) == 9


def test_cell_symbol():
    assert Cell.EMPTY.symbol == " "
    assert Cell.X.symbol == "X"


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("player", [Cell.X, Cell.O])
def test_every_line_wins(line, player):
    board = EMPTY_BOARD
    for index in line:
        board = place(board, index, player)

    assert WinChecker().evaluate(board) == WinResult(player=player, line=line)


def test_no_winner_on_empty_board():
    checker = WinChecker()
    assert checker.evaluate(EMPTY_BOARD) is None
    assert checker.get_winning_line(EMPTY_BOARD) == ()
    assert not checker.check_draw(EMPTY_BOARD)


def test_mixed_line_is_not_a_win():
    # X, O, X on the main diagonal
    board = make_board(x_cells=(0, 8), o_cells=(4,))
    assert WinChecker().evaluate(board) is None


def test_earliest_line_wins_ties():
    checker = WinChecker()

    # Both diagonals and nothing else: the first diagonal is listed first
    board = make_board(x_cells=(0, 2, 4, 6, 8))
    assert checker.evaluate(board).line == (0, 4, 8)

    # O on the top row, X on the bottom row: rows are checked top down
    board = make_board(x_cells=(6, 7, 8), o_cells=(0, 1, 2))
    assert checker.evaluate(board) == WinResult(player=Cell.O, line=(0, 1, 2))


def test_full_board_without_line_is_draw():
    checker = WinChecker()
    board = make_board(x_cells=(0, 2, 3, 7, 8), o_cells=(1, 4, 5, 6))

    assert checker.evaluate(board) is None
    assert checker.check_draw(board)


def test_full_board_with_line_is_not_draw():
    checker = WinChecker()
    board = make_board(x_cells=(0, 1, 2, 4, 7), o_cells=(3, 5, 6, 8))

    assert checker.check_winner(board) == Cell.X
    assert not checker.check_draw(board)


# ==================== MOVE VALIDATOR ====================

def test_validator_rejects_bad_moves():
    validator = MoveValidator()
    board = make_board(x_cells=(0,))

    assert validator.validate_move(board, 1).is_valid
    assert not validator.validate_move(board, 0).is_valid
    assert "occupied" in validator.validate_move(board, 0).error_message

    for bad_index in (-1, 9, "3", 1.0, True, None):
        assert not validator.validate_move(board, bad_index).is_valid


def test_validator_rejects_moves_after_win():
    validator = MoveValidator()
    board = make_board(x_cells=(0, 1, 2), o_cells=(3, 4))

    result = validator.validate_move(board, 8)
    assert not result.is_valid
    assert "won" in result.error_message
    assert validator.get_valid_moves(board) == []


def test_validator_jumps():
    validator = MoveValidator()

    assert validator.validate_jump(0, 1).is_valid
    assert validator.validate_jump(2, 3).is_valid
    assert not validator.validate_jump(3, 3).is_valid
    assert not validator.validate_jump(-1, 3).is_valid


def test_valid_moves_are_empty_cells():
    board = make_board(x_cells=(0,), o_cells=(4,))
    assert MoveValidator().get_valid_moves(board) == [1, 2, 3, 5, 6, 7, 8]


# ==================== GAME STATE ====================

def test_new_game():
    game = GameState()
    assert game.history == [EMPTY_BOARD]
    assert game.current_move == 0
    assert game.current_player == Cell.X
    assert game.get_empty_cells() == list(range(9))


def test_first_move():
    game = GameState()

    assert game.apply_move(0)
    assert game.history == [EMPTY_BOARD, make_board(x_cells=(0,))]
    assert game.current_move == 1
    assert game.current_player == Cell.O


def test_players_alternate():
    game = play(GameState(), 4, 0, 8, 2, 6)

    for n in range(1, len(game.history)):
        expected = Cell.X if n % 2 == 1 else Cell.O
        assert game.mover_at(n) == expected


def test_each_snapshot_adds_one_mark():
    game = play(GameState(), 4, 0, 8, 2)

    for n in range(1, len(game.history)):
        before, after = game.history[n - 1], game.history[n]
        changed = [i for i in range(9) if before[i] != after[i]]
        assert len(changed) == 1
        assert before[changed[0]] == Cell.EMPTY
        assert after[changed[0]] in (Cell.X, Cell.O)


def test_occupied_cell_is_ignored():
    game = play(GameState(), 4)
    before = game.copy()

    assert not game.apply_move(4)
    assert game == before


def test_bad_index_is_ignored():
    game = GameState()
    for bad_index in (-1, 9, 100):
        assert not game.apply_move(bad_index)
    assert game.history == [EMPTY_BOARD]
    assert game.current_move == 0


def test_win_blocks_further_moves():
    # X: 0, 8, 1, 2   O: 4, 6, 7
    game = play(GameState(), 0, 4, 8)
    assert WinChecker().evaluate(game.current_board) is None

    play(game, 6, 1, 7, 2)
    result = WinChecker().evaluate(game.current_board)
    assert result == WinResult(player=Cell.X, line=(0, 1, 2))

    history = list(game.history)
    for index in game.get_empty_cells():
        assert not game.apply_move(index)
    assert game.history == history


def test_draw_game():
    game = play(GameState(), 0, 1, 2, 4, 3, 5, 7, 6, 8)

    assert game.get_empty_cells() == []
    assert WinChecker().evaluate(game.current_board) is None
    assert WinChecker().check_draw(game.current_board)


def test_jump_keeps_history():
    game = play(GameState(), 0, 4, 8, 1)
    history = list(game.history)

    assert game.jump_to(2)
    assert game.current_move == 2
    assert game.current_board == make_board(x_cells=(0,), o_cells=(4,))
    assert game.history == history


def test_jump_twice_is_same_as_once():
    game = play(GameState(), 0, 4, 8)
    game.jump_to(1)
    once = game.copy()

    game.jump_to(1)
    assert game == once


def test_jump_out_of_range_is_rejected():
    game = play(GameState(), 0, 4)

    assert not game.jump_to(3)
    assert not game.jump_to(-1)
    assert game.current_move == 2


def test_move_after_jump_truncates():
    # Five snapshots: start plus four moves
    game = play(GameState(), 0, 4, 8, 1)
    assert len(game.history) == 5
    old = list(game.history)

    game.jump_to(2)
    assert game.apply_move(3)

    assert len(game.history) == 4
    assert game.history[:3] == old[:3]
    assert game.history[3] == make_board(x_cells=(0, 3), o_cells=(4,))
    assert game.current_move == 3


@pytest.mark.parametrize("k", range(5))
def test_truncation_length(k):
    game = play(GameState(), 0, 4, 8, 1, 7)
    game.jump_to(k)

    index = game.get_empty_cells()[0]
    assert game.apply_move(index)
    assert len(game.history) == k + 2
    assert game.current_move == k + 1


def test_jump_back_reopens_won_game():
    game = play(GameState(), 0, 3, 1, 4, 2)
    assert not game.apply_move(8)

    game.jump_to(4)
    assert game.apply_move(8)
    assert game.mover_at(5) == Cell.X
    assert len(game.history) == 6


def test_restart():
    game = play(GameState(), 0, 4, 8)
    game.jump_to(1)

    game.restart()
    assert game.history == [EMPTY_BOARD]
    assert game.current_move == 0
    assert game.current_player == Cell.X


def test_move_location_and_mover():
    game = play(GameState(), 4, 2)

    assert game.move_location(0) is None
    assert game.mover_at(0) is None
    assert game.move_location(1) == (2, 2)
    assert game.mover_at(1) == Cell.X
    assert game.move_location(2) == (1, 3)
    assert game.mover_at(2) == Cell.O
    assert game.move_location(3) is None


# ==================== MOVE HISTORY ====================

def test_history_labels():
    game = play(GameState(), 4, 2)
    entries = build_history(game)

    assert [e.move for e in entries] == [0, 1, 2]
    assert entries[0].label == "Game started"
    assert entries[1].label == "#1. Player X moved to (2, 2)"
    assert entries[2].label == "You are at move #2 (1, 3)"

    game.jump_to(0)
    assert build_history(game)[0].label == "Game start"


def test_history_descending_does_not_touch_state():
    game = play(GameState(), 4, 2, 0)
    history = list(game.history)

    entries = build_history(game, SortOrder.DESCENDING)
    assert [e.move for e in entries] == [3, 2, 1, 0]
    assert game.history == history


def test_sort_order_toggles():
    assert SortOrder.ASCENDING.toggled() == SortOrder.DESCENDING
    assert SortOrder.DESCENDING.toggled() == SortOrder.ASCENDING


# ==================== SESSION ====================

def test_session_first_move_status():
    session = GameSession()
    assert session.view().status_text == "Player: X"

    assert session.click_cell(0)
    view = session.view()
    assert view.status == GameStatus.IN_PROGRESS
    assert view.status_text == "Player: O"
    assert view.current_move == 1
    assert view.winning_line == ()


def test_session_reports_winner():
    session = GameSession()
    for index in (0, 4, 8, 6, 1, 7, 2):
        session.click_cell(index)

    view = session.view()
    assert view.status == GameStatus.WON
    assert view.winner == Cell.X
    assert view.winning_line == (0, 1, 2)
    assert view.status_text == "Winner: X"


def test_session_reports_draw():
    session = GameSession()
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        session.click_cell(index)

    view = session.view()
    assert view.status == GameStatus.DRAW
    assert view.winner is None
    assert view.status_text == "Draw! No one wins"


def test_session_notifies_listeners_on_change():
    session = GameSession()
    views = []
    session.add_listener(views.append)

    session.click_cell(4)
    session.click_cell(4)  # ignored
    session.select_move(5)  # ignored
    session.select_move(0)
    session.toggle_sort_order()
    session.restart()

    assert len(views) == 4
    assert views[0].board[4] == Cell.X
    assert views[1].current_move == 0
    assert views[2].sort_order == SortOrder.DESCENDING
    assert len(views[3].history) == 1


def test_session_remove_listener():
    session = GameSession()
    views = []
    session.add_listener(views.append)
    session.remove_listener(views.append)

    session.click_cell(0)
    assert views == []


def test_session_history_order():
    session = GameSession(sort_order=SortOrder.DESCENDING)
    session.click_cell(0)
    session.click_cell(1)

    view = session.view()
    assert [e.move for e in view.history] == [2, 1, 0]
    assert view.history[0].is_current

    session.toggle_sort_order()
    assert [e.move for e in session.view().history] == [0, 1, 2]


def test_selecting_current_move_does_not_notify():
    session = GameSession()
    views = []
    session.add_listener(views.append)

    assert session.select_move(0)
    assert views == []

    session.click_cell(4)
    assert session.select_move(1)
    assert len(views) == 1
