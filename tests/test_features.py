import numpy as np

from othello import OthelloGame
from othello.core import Disc, initialize_game_state
from othello.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_board_tensor,
    legal_move_mask,
    state_to_numpy,
)


def test_state_to_numpy_initial_position():
    state = initialize_game_state()
    board, aux = state_to_numpy(state)

    assert board.shape == (BOARD_CHANNELS, 8, 8)
    assert aux.shape == (AUX_VECTOR_SIZE,)
    assert board[0].sum() == 2
    assert board[1].sum() == 2
    assert board[0, 3, 4] == 1.0
    assert board[1, 3, 3] == 1.0
    # Legal destinations for black
    assert board[2].sum() == 4
    assert board[2, 2, 3] == 1.0
    assert aux.tolist() == [1.0, 0.0, 0.0]


def test_aux_vector_tracks_side_to_move_and_game_over():
    game = OthelloGame()
    game.commit_move(2, 3, Disc.BLACK)
    _, aux = state_to_numpy(game.state)
    assert aux.tolist() == [0.0, 1.0, 0.0]

    game.end_game()
    board, aux = state_to_numpy(game.state)
    assert aux[2] == 1.0
    assert board[2].sum() == 0


def test_legal_move_mask_indices():
    state = initialize_game_state()
    mask = legal_move_mask(state)

    assert mask.shape == (64,)
    assert np.flatnonzero(mask).tolist() == [19, 26, 37, 44]


def test_board_tensor_does_not_alias_state():
    state = initialize_game_state()
    tensor = build_board_tensor(state)
    tensor[:] = 0
    assert state.board[3, 3] == Disc.WHITE
