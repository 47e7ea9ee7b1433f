"""Move-selection policies for automated players."""

from .base import Policy, RandomPolicy, select_action
from .greedy import GreedyPolicy

__all__ = [
    "Policy",
    "RandomPolicy",
    "GreedyPolicy",
    "select_action",
]
