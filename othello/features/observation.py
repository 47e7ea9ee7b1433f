from __future__ import annotations

from typing import Tuple

import numpy as np

from othello.core import BOARD_SIZE, Disc, GameState, enumerate_legal_moves

BOARD_CHANNELS = 3  # black discs, white discs, legal destinations for the side to move
AUX_VECTOR_SIZE = 3  # current player one-hot (2) + game over flag


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (3, 8, 8) channel-first."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = state.board == Disc.BLACK
    tensor[1] = state.board == Disc.WHITE
    if not state.game_over:
        for move in enumerate_legal_moves(state):
            tensor[2, move.row, move.col] = 1.0
    return tensor


def build_aux_vector(state: GameState) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[int(state.current_player) - 1] = 1.0
    aux[2] = float(state.game_over)
    return aux


def state_to_numpy(state: GameState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), build_aux_vector(state)


def legal_move_mask(state: GameState) -> np.ndarray:
    """Flat (64,) int8 mask over cell indices that the side to move may play."""
    mask = np.zeros(BOARD_SIZE * BOARD_SIZE, dtype=np.int8)
    if state.game_over:
        return mask
    for move in enumerate_legal_moves(state):
        mask[move.index] = 1
    return mask
