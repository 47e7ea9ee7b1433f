"""Othello rule engine, greedy opponent and agent tooling."""

from . import core, env, evaluation, features, policies, validation
from .core import Disc, GameResult, GameState, IllegalMoveError, Move, OthelloGame
from .env import OthelloEnv
from .evaluation import EvaluationResult, MatchConfig, PositionalPolicy, evaluate_policies
from .features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    legal_move_mask,
    state_to_numpy,
)
from .policies import GreedyPolicy, Policy, RandomPolicy, select_action
from .validation import BoardStateError

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "policies",
    "validation",
    "Disc",
    "GameResult",
    "GameState",
    "IllegalMoveError",
    "Move",
    "OthelloGame",
    "OthelloEnv",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_aux_vector",
    "build_board_tensor",
    "legal_move_mask",
    "state_to_numpy",
    "Policy",
    "RandomPolicy",
    "GreedyPolicy",
    "select_action",
    "PositionalPolicy",
    "MatchConfig",
    "EvaluationResult",
    "evaluate_policies",
    "BoardStateError",
]
