"""Core game logic for Othello."""

from .state import BOARD_SIZE, Disc, GameResult, GameState, Move, MoveRecord
from .rules import (
    DIRECTIONS,
    NUM_CELLS,
    IllegalMoveError,
    apply_move,
    check_move,
    count_flips,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    flank_length,
    flipped_positions,
    has_legal_move,
    initialize_game_state,
    is_legal_move,
    resolve_turn,
    score,
    winner,
)
from .greedy import select_greedy_move
from .engine import OthelloGame

__all__ = [
    "BOARD_SIZE",
    "DIRECTIONS",
    "NUM_CELLS",
    "Disc",
    "GameResult",
    "GameState",
    "Move",
    "MoveRecord",
    "IllegalMoveError",
    "OthelloGame",
    "apply_move",
    "check_move",
    "count_flips",
    "decode_move",
    "encode_move",
    "enumerate_legal_moves",
    "flank_length",
    "flipped_positions",
    "has_legal_move",
    "initialize_game_state",
    "is_legal_move",
    "resolve_turn",
    "score",
    "select_greedy_move",
    "winner",
]
