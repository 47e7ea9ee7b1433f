from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

BOARD_SIZE = 8

BoardArray = NDArray[np.int8]


class Disc(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Disc":
        if self == Disc.BLACK:
            return Disc.WHITE
        if self == Disc.WHITE:
            return Disc.BLACK
        return Disc.EMPTY

    @property
    def is_player(self) -> bool:
        return self != Disc.EMPTY


class GameResult(Enum):
    ONGOING = "ongoing"
    BLACK_WIN = "black_win"
    WHITE_WIN = "white_win"
    DRAW = "draw"


@dataclass(frozen=True)
class Move:
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    @staticmethod
    def from_index(index: int) -> "Move":
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise ValueError("Cell index out of range.")
        return Move(index // BOARD_SIZE, index % BOARD_SIZE)


@dataclass(frozen=True)
class MoveRecord:
    move: Move
    player: Disc
    flipped_positions: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)
    resulted_in: GameResult = GameResult.ONGOING


@dataclass
class GameState:
    board: BoardArray  # shape (8, 8), dtype=np.int8, values Disc.EMPTY/BLACK/WHITE
    current_player: Disc = Disc.BLACK
    game_over: bool = False
    move_count: int = 0
    last_move: Optional[MoveRecord] = None

    def copy(self) -> "GameState":
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            game_over=self.game_over,
            move_count=self.move_count,
            last_move=self.last_move,
        )

    def disc_count(self, player: Disc) -> int:
        return int(np.count_nonzero(self.board == int(player)))

    @property
    def result(self) -> GameResult:
        if not self.game_over:
            return GameResult.ONGOING
        black = self.disc_count(Disc.BLACK)
        white = self.disc_count(Disc.WHITE)
        if black > white:
            return GameResult.BLACK_WIN
        if white > black:
            return GameResult.WHITE_WIN
        return GameResult.DRAW

    def __repr__(self) -> str:
        board_str = "\n".join(" ".join(str(cell) for cell in row) for row in self.board)
        return (
            f"GameState(current={self.current_player.name}, over={self.game_over}, moves={self.move_count})\n"
            f"{board_str}"
        )


# Convenient tuple alias used across modules
Position = Tuple[int, int]
