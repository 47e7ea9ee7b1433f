from __future__ import annotations

import numpy as np

from othello.core import GameState


class Policy:
    """Policy interface producing move probabilities over the 64 board cells."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


def select_action(
    probabilities: np.ndarray,
    temperature: float,
    rng: np.random.Generator,
) -> int:
    if probabilities.sum() == 0:
        raise ValueError(
            "Policy produced zero probability over legal moves."
        )
    probs = probabilities.astype(np.float64, copy=True)
    if temperature <= 1e-6:
        return int(np.argmax(probs))
    adjusted = probs ** (1.0 / temperature)
    adjusted /= adjusted.sum()
    return int(rng.choice(len(adjusted), p=adjusted))
