from __future__ import annotations

from typing import Optional, Sequence

from .rules import count_flips, enumerate_legal_moves
from .state import Disc, GameState, Move


def select_greedy_move(
    state: GameState,
    player: Disc,
    candidates: Optional[Sequence[Move]] = None,
) -> Optional[Move]:
    """Legal move for ``player`` that flips the most discs right now.

    Ties go to the first candidate in row-major order. ``candidates`` lets a
    caller pass an already computed move list for the same position.
    """
    if candidates is None:
        candidates = enumerate_legal_moves(state, player)

    best_move: Optional[Move] = None
    max_flips = -1
    for move in candidates:
        flips = count_flips(state, move, player)
        if flips > max_flips:
            max_flips = flips
            best_move = move
    return best_move
