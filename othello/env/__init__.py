"""Gymnasium environment wrapping the Othello engine."""

from .gym_env import OthelloEnv, render_board

__all__ = ["OthelloEnv", "render_board"]
