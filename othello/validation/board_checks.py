from __future__ import annotations

import numpy as np

from othello.core.state import BOARD_SIZE, Disc

_VALID_CELLS = (int(Disc.EMPTY), int(Disc.BLACK), int(Disc.WHITE))


class BoardStateError(ValueError):
    pass


def validate_board(board) -> np.ndarray:
    """Return ``board`` as a fresh ``int8`` array after checking shape and cell values."""
    array = np.asarray(board)
    if array.shape != (BOARD_SIZE, BOARD_SIZE):
        raise BoardStateError(f"board must have shape ({BOARD_SIZE}, {BOARD_SIZE}), got {array.shape}")
    if not np.issubdtype(array.dtype, np.integer):
        raise BoardStateError("board cells must be integers")
    if not np.isin(array, _VALID_CELLS).all():
        raise BoardStateError("board contains values other than empty, black or white")
    return array.astype(np.int8, copy=True)


def validate_player(player) -> Disc:
    try:
        disc = Disc(int(player))
    except (TypeError, ValueError) as exc:
        raise BoardStateError(f"unknown player {player!r}") from exc
    if not disc.is_player:
        raise BoardStateError("the side to move must be black or white")
    return disc
