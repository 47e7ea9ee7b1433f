"""Evaluation helpers: baseline heuristics and policy-vs-policy matches."""

from .match import (
    POLICY_NAMES,
    EvaluationResult,
    GameSummary,
    MatchConfig,
    PositionalPolicy,
    build_policy,
    evaluate_policies,
    evaluate_position,
    play_game,
)

__all__ = [
    "POLICY_NAMES",
    "EvaluationResult",
    "GameSummary",
    "MatchConfig",
    "PositionalPolicy",
    "build_policy",
    "evaluate_policies",
    "evaluate_position",
    "play_game",
]
