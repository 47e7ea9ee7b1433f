from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .state import BOARD_SIZE, BoardArray, Disc, GameState, Move, MoveRecord, Position

NUM_CELLS = BOARD_SIZE * BOARD_SIZE
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class IllegalMoveError(ValueError):
    pass


def encode_move(move: Move) -> int:
    return move.index


def decode_move(index: int) -> Move:
    return Move.from_index(index)


def initialize_game_state() -> GameState:
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    centre = BOARD_SIZE // 2
    board[centre - 1, centre - 1] = Disc.WHITE
    board[centre - 1, centre] = Disc.BLACK
    board[centre, centre - 1] = Disc.BLACK
    board[centre, centre] = Disc.WHITE
    return GameState(board=board, current_player=Disc.BLACK, game_over=False)


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def flank_length(board: BoardArray, row: int, col: int, dr: int, dc: int, player: Disc) -> int:
    """Number of opponent discs flanked from ``(row, col)`` along ``(dr, dc)``.

    Returns 0 when the direction does not satisfy the flank condition: the
    adjacent cell must hold an opponent disc and the run of opponent discs must
    end on one of ``player``'s discs before an empty cell or the board edge.
    """
    player = Disc(player)
    opponent = player.opponent
    if not opponent.is_player:
        return 0
    r, c = row + dr, col + dc
    run = 0
    while in_bounds(r, c) and board[r, c] == opponent:
        run += 1
        r += dr
        c += dc
    if run == 0 or not in_bounds(r, c) or board[r, c] != player:
        return 0
    return run


def is_legal_move(board: BoardArray, row: int, col: int, player: Disc) -> bool:
    if not in_bounds(row, col) or board[row, col] != Disc.EMPTY:
        return False
    return any(flank_length(board, row, col, dr, dc, player) > 0 for dr, dc in DIRECTIONS)


def enumerate_legal_moves(state: GameState, player: Optional[Disc] = None) -> List[Move]:
    if player is None:
        player = state.current_player
    player = _as_disc(player)
    if player is None or not player.is_player:
        return []

    legal: List[Move] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if is_legal_move(state.board, row, col, player):
                legal.append(Move(row, col))
    return legal


def has_legal_move(state: GameState, player: Disc) -> bool:
    player = _as_disc(player)
    if player is None or not player.is_player:
        return False
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if is_legal_move(state.board, row, col, player):
                return True
    return False


def flipped_positions(board: BoardArray, row: int, col: int, player: Disc) -> List[Position]:
    flips: List[Position] = []
    for dr, dc in DIRECTIONS:
        run = flank_length(board, row, col, dr, dc, player)
        for step in range(1, run + 1):
            flips.append((row + dr * step, col + dc * step))
    return flips


def count_flips(state: GameState, move: Move, player: Disc) -> int:
    return sum(flank_length(state.board, move.row, move.col, dr, dc, player) for dr, dc in DIRECTIONS)


def check_move(state: GameState, move: Move, player: Disc) -> Optional[str]:
    """Return why ``player`` may not play ``move`` now, or ``None`` if it is legal."""
    if not in_bounds(move.row, move.col):
        return "out of bounds"
    if state.game_over:
        return "game is over"
    if player != state.current_player:
        return "not this player's turn"
    if state.board[move.row, move.col] != Disc.EMPTY:
        return "cell is occupied"
    if not is_legal_move(state.board, move.row, move.col, state.current_player):
        return "move flanks no discs"
    return None


def resolve_turn(mover: Disc, *, opponent_can_move: bool, mover_can_move: bool) -> Optional[Disc]:
    """Side to move after ``mover`` has played, or ``None`` when the game is over.

    The opponent moves next if it can. Otherwise the mover keeps the turn
    (a forced pass) if it still has a move, and the game ends when neither can.
    """
    if opponent_can_move:
        return mover.opponent
    if mover_can_move:
        return mover
    return None


def apply_move(
    state: GameState,
    move: Move,
    player: Optional[Disc] = None,
    *,
    in_place: bool = False,
) -> GameState:
    if player is None:
        player = state.current_player
    reason = check_move(state, move, player)
    if reason is not None:
        raise IllegalMoveError(f"Illegal move {move.as_tuple()} for {getattr(player, 'name', player)}: {reason}.")

    target = state if in_place else state.copy()
    mover = target.current_player
    flips = flipped_positions(target.board, move.row, move.col, mover)

    target.board[move.row, move.col] = mover
    for row, col in flips:
        target.board[row, col] = mover
    target.move_count += 1

    next_player = resolve_turn(
        mover,
        opponent_can_move=has_legal_move(target, mover.opponent),
        mover_can_move=has_legal_move(target, mover),
    )
    if next_player is None:
        target.game_over = True
    else:
        target.current_player = next_player

    target.last_move = MoveRecord(
        move=move,
        player=mover,
        flipped_positions=tuple(flips),
        resulted_in=target.result,
    )
    return target


def score(state: GameState) -> Tuple[int, int]:
    return state.disc_count(Disc.BLACK), state.disc_count(Disc.WHITE)


def winner(state: GameState) -> Disc:
    if not state.game_over:
        return Disc.EMPTY
    black, white = score(state)
    if black > white:
        return Disc.BLACK
    if white > black:
        return Disc.WHITE
    return Disc.EMPTY


def _as_disc(value) -> Optional[Disc]:
    try:
        return Disc(int(value))
    except (TypeError, ValueError):
        return None
