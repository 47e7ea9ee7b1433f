from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from othello.core import BOARD_SIZE, Disc, GameResult, GameState, Move, apply_move, enumerate_legal_moves
from othello.env import OthelloEnv
from othello.policies import GreedyPolicy, Policy, RandomPolicy, select_action

CORNER_WEIGHT = 25.0
EDGE_WEIGHT = 3.0
MOBILITY_WEIGHT = 2.0
DISC_WEIGHT = 0.5


def evaluate_position(board: np.ndarray, player: Disc) -> float:
    """Static score of ``board`` for ``player``: corners, edges, mobility and disc count."""
    opponent = player.opponent
    last = BOARD_SIZE - 1
    signed = np.where(board == player, 1.0, np.where(board == opponent, -1.0, 0.0))

    score = CORNER_WEIGHT * (signed[0, 0] + signed[0, last] + signed[last, 0] + signed[last, last])
    # Corners sit on two edges and are counted by both.
    edges = signed[0, :].sum() + signed[last, :].sum() + signed[:, 0].sum() + signed[:, last].sum()
    score += EDGE_WEIGHT * edges

    position = GameState(board=board, current_player=player)
    mobility = len(enumerate_legal_moves(position, player)) - len(enumerate_legal_moves(position, opponent))
    score += MOBILITY_WEIGHT * mobility

    score += DISC_WEIGHT * signed.sum()
    return float(score)


class PositionalPolicy(Policy):
    """One-ply heuristic baseline: softmax over the positional score after each move."""

    def __init__(self, sharpness: float = 1.0) -> None:
        self.sharpness = sharpness

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        indices = np.flatnonzero(legal_mask)
        if len(indices) == 0:
            return legal_mask.astype(np.float32)

        player = state.current_player
        scores = []
        for idx in indices:
            after = apply_move(state, Move.from_index(int(idx)))
            scores.append(evaluate_position(after.board, player))

        scores = np.array(scores) * self.sharpness
        scores -= scores.max()
        probs = np.exp(scores)
        probs /= probs.sum()

        result = np.zeros_like(legal_mask, dtype=np.float32)
        result[indices] = probs
        return result


POLICY_NAMES = ("random", "greedy", "positional")


def build_policy(name: str) -> Policy:
    if name == "random":
        return RandomPolicy()
    if name == "greedy":
        return GreedyPolicy()
    if name == "positional":
        return PositionalPolicy()
    raise ValueError(f"Unknown policy {name!r}; expected one of {', '.join(POLICY_NAMES)}.")


@dataclass
class MatchConfig:
    episodes: int = 20
    black_policy: str = "greedy"
    white_policy: str = "random"
    temperature: float = 1.0
    seed: Optional[int] = None


@dataclass
class GameSummary:
    result: GameResult
    length: int
    black_discs: int
    white_discs: int

    @property
    def margin(self) -> int:
        return self.black_discs - self.white_discs


@dataclass
class EvaluationResult:
    games_played: int
    black_wins: int
    white_wins: int
    draws: int
    average_length: float
    average_margin: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)

    @classmethod
    def from_games(cls, games: Sequence[GameSummary]) -> "EvaluationResult":
        played = len(games)
        return cls(
            games_played=played,
            black_wins=sum(1 for game in games if game.result == GameResult.BLACK_WIN),
            white_wins=sum(1 for game in games if game.result == GameResult.WHITE_WIN),
            draws=sum(1 for game in games if game.result == GameResult.DRAW),
            average_length=sum(game.length for game in games) / max(1, played),
            average_margin=sum(game.margin for game in games) / max(1, played),
        )


def play_game(
    policy_black: Policy,
    policy_white: Policy,
    *,
    rng: Optional[np.random.Generator] = None,
    temperature: float = 1.0,
    env_factory: Optional[Callable[[], OthelloEnv]] = None,
) -> GameSummary:
    rng = rng or np.random.default_rng()
    env_factory = env_factory or OthelloEnv
    env = env_factory()
    obs, info = env.reset()
    terminated = False
    ply = 0

    while not terminated:
        state_snapshot = env.state
        legal_mask = info["legal_action_mask"]
        policy = policy_black if state_snapshot.current_player == Disc.BLACK else policy_white
        probs = policy.act(state_snapshot, legal_mask) * legal_mask
        if probs.sum() <= 0:
            probs = legal_mask.astype(np.float32)
        probs = probs / probs.sum()
        action_index = select_action(probs, temperature, rng)
        obs, reward, terminated, truncated, info = env.step(action_index)
        ply += 1
        if truncated:
            terminated = True

    black, white = env.game.score()
    return GameSummary(result=env.game.state.result, length=ply, black_discs=black, white_discs=white)


def evaluate_policies(
    policy_black: Policy,
    policy_white: Policy,
    *,
    episodes: int,
    rng: Optional[np.random.Generator] = None,
    temperature: float = 1.0,
    env_factory: Optional[Callable[[], OthelloEnv]] = None,
) -> EvaluationResult:
    rng = rng or np.random.default_rng()
    games = [
        play_game(
            policy_black,
            policy_white,
            rng=rng,
            temperature=temperature,
            env_factory=env_factory,
        )
        for _ in range(episodes)
    ]
    return EvaluationResult.from_games(games)
