from __future__ import annotations

import logging
import operator
from typing import List, Optional, Tuple

import numpy as np

from othello.validation import validate_board, validate_player

from .greedy import select_greedy_move
from .rules import (
    apply_move,
    check_move,
    enumerate_legal_moves,
    initialize_game_state,
    score,
    winner,
)
from .state import Disc, GameState, Move, MoveRecord

logger = logging.getLogger(__name__)


class OthelloGame:
    """Board and turn state for one game of Othello.

    All queries are side-effect free apart from filling the valid-move cache.
    The only ways to change the game are :meth:`commit_move`, :meth:`end_game`
    and :meth:`reset`. Rejected moves are reported by a ``False`` return value
    rather than an exception.
    """

    def __init__(self) -> None:
        self._state = initialize_game_state()
        self._cached_player: Optional[Disc] = None
        self._cached_moves: Optional[List[Move]] = None

    @classmethod
    def from_position(cls, board, current_player: Disc = Disc.BLACK) -> "OthelloGame":
        game = cls()
        game._state = GameState(board=validate_board(board), current_player=validate_player(current_player))
        return game

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def board(self) -> np.ndarray:
        return self._state.board.copy()

    @property
    def state(self) -> GameState:
        return self._state.copy()

    @property
    def current_player(self) -> Disc:
        return self._state.current_player

    @property
    def is_game_over(self) -> bool:
        return self._state.game_over

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self._state.last_move

    def valid_moves(self, player: Disc) -> List[Move]:
        """Legal moves for ``player`` in row-major order, ignoring the terminal flag."""
        if self._cached_moves is not None and self._cached_player == player:
            return list(self._cached_moves)

        moves = enumerate_legal_moves(self._state, player)
        self._cached_moves = list(moves)
        self._cached_player = player
        return moves

    def has_no_valid_moves(self, player: Optional[Disc] = None) -> bool:
        """True once the game is over, or when ``player`` (default: side to move) cannot move."""
        if self._state.game_over:
            return True
        if player is None:
            player = self._state.current_player
        return not self.valid_moves(player)

    def greedy_move(self, player: Disc) -> Optional[Move]:
        return select_greedy_move(self._state, player, candidates=self.valid_moves(player))

    def score(self) -> Tuple[int, int]:
        return score(self._state)

    def winner(self) -> Disc:
        return winner(self._state)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def commit_move(self, row: int, col: int, player: Disc) -> bool:
        """Play ``player`` at ``(row, col)``; ``False`` leaves the game untouched.

        Coordinates must be integers (``operator.index``); anything else is
        rejected like an off-board move.
        """
        try:
            move = Move(operator.index(row), operator.index(col))
        except TypeError:
            logger.debug("Rejected move %r for %r: coordinates are not integers", (row, col), player)
            return False
        reason = check_move(self._state, move, player)
        if reason is not None:
            logger.debug("Rejected move %s for %r: %s", move.as_tuple(), player, reason)
            return False

        apply_move(self._state, move, self._state.current_player, in_place=True)
        self._invalidate_cache()
        if self._state.game_over:
            black, white = self.score()
            logger.debug("Game over after %d moves: black %d, white %d", self._state.move_count, black, white)
        return True

    def end_game(self) -> None:
        """Mark the game finished without touching the board."""
        self._state.game_over = True

    def reset(self) -> None:
        self._state = initialize_game_state()
        self._invalidate_cache()

    def _invalidate_cache(self) -> None:
        self._cached_moves = None
        self._cached_player = None

    def __repr__(self) -> str:
        return f"OthelloGame({self._state!r})"
