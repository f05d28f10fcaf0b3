"""
Tests for the TicTacToe logic and audit modules.
Run with: pytest
"""

from datetime import datetime, timezone

import pytest

from logic.game_state import (
    GameState,
    GameStatus,
    Player,
    apply_move,
    board_from_string,
    board_to_string,
    create_empty_board,
    get_empty_cells,
    next_player,
    reset_game,
)
from logic.move_validator import MoveError, MoveValidator, is_valid_move
from logic.win_checker import WINNING_LINES, WinChecker, WinResult, get_winner, get_winning_line, is_draw
from audit.events import (
    AuditAction,
    AuditEvent,
    ErrorMeta,
    MoveMeta,
    ResetMeta,
    make_event,
    utc_timestamp,
)
from audit.trail import AuditTrail


def play(moves, board=None):
    """Play indices in order, alternating from whoever is next."""
    board = board if board is not None else create_empty_board()
    for index in moves:
        board = apply_move(board, index, next_player(board))
    return board


def reachable_boards():
    """Every board reachable by alternating legal play from the empty board."""
    seen = set()
    stack = [create_empty_board()]
    while stack:
        board = stack.pop()
        if board in seen:
            continue
        seen.add(board)
        if get_winner(board).winner is not None:
            continue
        for index in get_empty_cells(board):
            stack.append(apply_move(board, index, next_player(board)))
    return seen


# ==================== BOARD MODEL ====================

def test_empty_board():
    board = create_empty_board()
    assert len(board) == 9
    assert all(cell is None for cell in board)


def test_reset_returns_fresh_empty_board():
    played = play([0, 4, 8])
    fresh = reset_game()
    assert fresh == create_empty_board()
    assert played != fresh
    assert played[0] == Player.X


def test_board_from_string():
    board = board_from_string("XO.-  ..x")
    assert board[0] == Player.X
    assert board[1] == Player.O
    assert board[8] == Player.X
    assert get_empty_cells(board) == [2, 3, 4, 5, 6, 7]
    assert board_to_string(board) == "XO......X"


@pytest.mark.parametrize("text", ["XOX", "XOXOXOXOXO", "XOXOXOXOZ"])
def test_board_from_string_rejects_bad_input(text):
    with pytest.raises(ValueError):
        board_from_string(text)


def test_player_opposite():
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X


# ==================== MOVES ====================

def test_apply_move_does_not_mutate_input():
    board = play([4])
    snapshot = tuple(board)

    for index in get_empty_cells(board):
        result = apply_move(board, index, Player.O)
        assert board == snapshot
        assert result[index] == Player.O
        assert [i for i in range(9) if result[i] != board[i]] == [index]


def test_apply_move_returns_new_tuple():
    board = create_empty_board()
    result = apply_move(board, 0, Player.X)
    assert isinstance(result, tuple)
    assert result is not board


def test_is_valid_move_on_every_index():
    board = board_from_string("XO..X...O")
    for index in range(9):
        assert is_valid_move(board, index) == (board[index] is None)


@pytest.mark.parametrize("index", [-1, 9, 10, 100, 1.0, "1", None, True])
def test_is_valid_move_rejects_out_of_range(index):
    assert not is_valid_move(create_empty_board(), index)


def test_next_player_alternates():
    board = create_empty_board()
    players = []
    for index in range(9):
        players.append(next_player(board))
        board = apply_move(board, index, players[-1])

    assert players == [Player.X, Player.O] * 4 + [Player.X]


# ==================== OUTCOME ====================

def test_top_row_win():
    """X 0, O 4, X 1, O 7, X 2 wins on the top row."""
    board = play([0, 4, 1, 7, 2])
    assert get_winner(board) == WinResult(winner=Player.X, draw=False)
    assert get_winning_line(board) == (0, 1, 2)


def test_full_board_draw():
    board = board_from_string("XOXXOOOXX")
    assert get_winner(board) == WinResult(winner=None, draw=True)
    assert is_draw(board)


def test_in_progress():
    board = play([0, 4])
    assert get_winner(board) == WinResult(winner=None, draw=False)
    assert not is_draw(board)
    assert get_winning_line(board) is None


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line):
    cells = ["."] * 9
    for index in line:
        cells[index] = "O"
    board = board_from_string("".join(cells))
    assert get_winner(board).winner == Player.O
    assert get_winning_line(board) == line


def test_full_board_with_line_is_win_not_draw():
    board = board_from_string("XXXOOXXOO")
    assert get_winner(board) == WinResult(winner=Player.X, draw=False)
    assert not is_draw(board)


def test_reachable_boards_have_at_most_one_winner():
    boards = reachable_boards()
    # 5478 distinct positions are reachable in tic-tac-toe
    assert len(boards) == 5478

    for board in boards:
        owners = {board[a] for a, b, c in WINNING_LINES
                  if board[a] is not None and board[a] == board[b] == board[c]}
        assert len(owners) <= 1


def test_reset_then_replay_matches_fresh_game():
    moves = [4, 0, 8, 2, 1, 7, 6, 3, 5]
    played = play(moves)
    assert get_winner(play(moves, reset_game())) == get_winner(play(moves, create_empty_board()))
    assert play(moves, reset_game()) == played


# ==================== GAME STATE ====================

def test_game_state_defaults():
    state = GameState()
    assert state.board == create_empty_board()
    assert state.current_player == Player.X
    assert state.status == GameStatus.IN_PROGRESS
    assert not state.is_game_over


def test_win_checker_updates_turn_and_result():
    checker = WinChecker()
    state = GameState()

    for index in [0, 4, 1, 7]:
        state.record_move(index, apply_move(state.board, index, state.current_player))
        checker.update_game_state(state)
    assert state.current_player == Player.X
    assert state.status == GameStatus.IN_PROGRESS

    state.record_move(2, apply_move(state.board, 2, state.current_player))
    checker.update_game_state(state)
    assert state.winner == Player.X
    assert state.is_game_over
    assert state.status == GameStatus.WON
    assert [m.index for m in state.moves] == [0, 4, 1, 7, 2]
    assert state.moves[-1].move_number == 5


def test_win_checker_draw():
    state = GameState(board=board_from_string("XOXXOOOXX"))
    WinChecker().update_game_state(state)
    assert state.is_draw
    assert state.is_game_over
    assert state.status == GameStatus.DRAWN


def test_game_state_copy_is_independent():
    state = GameState()
    state.record_move(0, apply_move(state.board, 0, Player.X))
    copied = state.copy()
    copied.record_move(1, apply_move(copied.board, 1, Player.O))
    assert len(state.moves) == 1
    assert state.board[1] is None


def test_print_board(capsys):
    GameState(board=play([0, 4])).print_board()
    out = capsys.readouterr().out
    assert "X" in out and "O" in out
    assert "Current turn: X" in out


# ==================== VALIDATOR ====================

def test_validator_order():
    validator = MoveValidator()
    state = GameState(board=play([0, 4, 1, 7, 2]))
    WinChecker().update_game_state(state)

    # Range is checked before game over, game over before occupancy
    assert validator.validate_move(state, 9).error == MoveError.OUT_OF_RANGE_INDEX
    assert validator.validate_move(state, 0).error == MoveError.GAME_ALREADY_OVER
    assert validator.validate_move(state, 5).error == MoveError.GAME_ALREADY_OVER


def test_validator_messages():
    validator = MoveValidator()
    state = GameState(board=play([4]))

    occupied = validator.validate_move(state, 4)
    assert not occupied.is_valid
    assert occupied.error == MoveError.CELL_OCCUPIED
    assert occupied.error_message == "Cell already occupied."
    assert occupied.audit_message == "Invalid move - occupied"

    ok = validator.validate_move(state, 0)
    assert ok.is_valid
    assert ok.error is None


def test_get_valid_moves():
    validator = MoveValidator()
    state = GameState(board=play([4, 0]))
    assert validator.get_valid_moves(state) == [1, 2, 3, 5, 6, 7, 8]

    state.is_game_over = True
    assert validator.get_valid_moves(state) == []


# ==================== AUDIT ====================

def test_utc_timestamp_format():
    stamp = utc_timestamp(datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc))
    assert stamp == "2024-01-02T03:04:05.678Z"
    assert utc_timestamp().endswith("Z")


def test_event_snapshots_are_copied():
    before = [None] * 9
    event = make_event(AuditAction.ERROR, ErrorMeta("Out of range index", 9), "anonymous",
                       before=before)
    before[0] = Player.X

    assert event.before == (None,) * 9
    assert event.after is None
    with pytest.raises(AttributeError):
        event.action = AuditAction.MOVE


def test_event_describe_and_details():
    move = make_event(AuditAction.MOVE, MoveMeta(index=4, player=Player.X), "alice")
    assert move.describe().startswith("MOVE · ")
    assert move.describe().endswith("user: alice")
    assert move.details() == ["index: 4", "player: X"]

    error = make_event(AuditAction.ERROR, ErrorMeta("Move after game over", 3), "alice")
    assert error.describe().endswith("· Move after game over")
    assert error.details() == ["index: 3"]

    reset = make_event(AuditAction.RESET, ResetMeta(), "alice")
    assert reset.details() == []
    assert reset.message is None


def test_audit_trail():
    trail = AuditTrail()
    first = trail.record(make_event(AuditAction.RESET, ResetMeta(), "anonymous"))
    second = trail.record(make_event(AuditAction.MOVE, MoveMeta(0, Player.X), "anonymous"))

    assert len(trail) == 2
    assert trail.events == (first, second)
    assert trail.recent() == [second, first]

    trail.clear()
    assert len(trail) == 0
    assert trail.events == ()


def test_audit_event_compares_by_value():
    event = AuditEvent(
        timestamp="2024-01-01T00:00:00.000Z",
        action=AuditAction.RESET,
        user_id="anonymous",
        meta=ResetMeta(),
        before=create_empty_board(),
        after=create_empty_board(),
    )
    assert event == AuditEvent(
        timestamp="2024-01-01T00:00:00.000Z",
        action=AuditAction.RESET,
        user_id="anonymous",
        meta=ResetMeta(),
        before=[None] * 9,
        after=[None] * 9,
    )


def test_event_describe_shows_reason():
    event = make_event(AuditAction.RESET, ResetMeta(), "alice", reason="new round")
    assert event.describe().endswith("user: alice · reason: new round")
    assert "reason" not in make_event(AuditAction.RESET, ResetMeta(), "alice").describe()


def test_win_checker_winning_line_for_session():
    checker = WinChecker()
    state = GameState(board=play([0, 4, 1, 7, 2]))
    assert checker.get_winning_line(state) == (0, 1, 2)
    assert checker.get_winning_line(GameState()) is None
