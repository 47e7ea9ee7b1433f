"""Sanity checks for externally supplied positions."""

from .board_checks import BoardStateError, validate_board, validate_player

__all__ = ["BoardStateError", "validate_board", "validate_player"]
