import numpy as np
import pytest

from othello.core import Disc, initialize_game_state
from othello.validation import BoardStateError, validate_board, validate_player


def test_validate_board_ok():
    state = initialize_game_state()
    board = validate_board(state.board.tolist())
    assert board.dtype == np.int8
    assert np.array_equal(board, state.board)


def test_validate_board_returns_copy():
    source = np.zeros((8, 8), dtype=np.int64)
    board = validate_board(source)
    board[0, 0] = Disc.BLACK
    assert source[0, 0] == 0


def test_validate_board_wrong_shape():
    with pytest.raises(BoardStateError):
        validate_board(np.zeros((8, 9), dtype=np.int8))


def test_validate_board_bad_values():
    board = np.zeros((8, 8), dtype=np.int8)
    board[4, 4] = 3
    with pytest.raises(BoardStateError):
        validate_board(board)


def test_validate_board_rejects_floats():
    with pytest.raises(BoardStateError):
        validate_board(np.zeros((8, 8), dtype=np.float32))


def test_validate_player():
    assert validate_player(2) == Disc.WHITE
    with pytest.raises(BoardStateError):
        validate_player(Disc.EMPTY)
    with pytest.raises(BoardStateError):
        validate_player("black")
