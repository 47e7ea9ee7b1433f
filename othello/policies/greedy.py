from __future__ import annotations

import numpy as np

from othello.core import GameState, Move, select_greedy_move

from .base import Policy


class GreedyPolicy(Policy):
    """Deterministic one-ply policy: all mass on the move that flips the most discs."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros(legal_mask.shape, dtype=np.float32)
        candidates = [Move.from_index(int(idx)) for idx in np.flatnonzero(legal_mask)]
        move = select_greedy_move(state, state.current_player, candidates=candidates)
        if move is not None:
            probs[move.index] = 1.0
        return probs
