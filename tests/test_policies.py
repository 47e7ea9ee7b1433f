import numpy as np
import pytest

from othello import OthelloGame
from othello.core import Disc, Move, initialize_game_state, select_greedy_move
from othello.features import legal_move_mask
from othello.policies import GreedyPolicy, RandomPolicy, select_action


def test_random_policy_uniform_over_legal_moves():
    state = initialize_game_state()
    mask = legal_move_mask(state)

    probs = RandomPolicy().act(state, mask)

    assert probs.shape == (64,)
    assert np.isclose(probs.sum(), 1.0)
    assert np.allclose(probs[mask == 1], 0.25)
    assert np.all(probs[mask == 0] == 0)


def test_random_policy_empty_mask():
    state = initialize_game_state()
    probs = RandomPolicy().act(state, np.zeros(64, dtype=np.int8))
    assert probs.sum() == 0


def test_greedy_policy_matches_engine():
    game = OthelloGame()
    game.commit_move(2, 3, Disc.BLACK)
    state = game.state

    probs = GreedyPolicy().act(state, legal_move_mask(state))

    expected = game.greedy_move(Disc.WHITE)
    assert probs[expected.index] == 1.0
    assert probs.sum() == 1.0


def test_select_greedy_move_tie_breaks_row_major():
    state = initialize_game_state()
    assert select_greedy_move(state, Disc.BLACK) == Move(2, 3)
    assert select_greedy_move(state, Disc.WHITE) == Move(2, 4)
    assert select_greedy_move(state, Disc.EMPTY) is None


def test_select_greedy_move_uses_given_candidates():
    state = initialize_game_state()
    candidates = [Move(5, 4), Move(4, 5)]
    assert select_greedy_move(state, Disc.BLACK, candidates=candidates) == Move(5, 4)


def test_select_action_greedy_temperature():
    probs = np.array([0.1, 0.6, 0.3], dtype=np.float32)
    assert select_action(probs, 0.0, np.random.default_rng(0)) == 1


def test_select_action_samples_only_supported_actions():
    probs = np.array([0.0, 0.5, 0.0, 0.5], dtype=np.float32)
    rng = np.random.default_rng(3)
    picks = {select_action(probs, 1.0, rng) for _ in range(50)}
    assert picks <= {1, 3}


def test_select_action_rejects_zero_distribution():
    with pytest.raises(ValueError):
        select_action(np.zeros(4, dtype=np.float32), 1.0, np.random.default_rng(0))
