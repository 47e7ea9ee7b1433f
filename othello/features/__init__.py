"""Feature extraction helpers for Othello agents."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    legal_move_mask,
    state_to_numpy,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "legal_move_mask",
    "state_to_numpy",
]
