from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from othello.core import (
    BOARD_SIZE,
    NUM_CELLS,
    GameResult,
    GameState,
    IllegalMoveError,
    OthelloGame,
    decode_move,
)
from othello.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    legal_move_mask,
)


class OthelloEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(NUM_CELLS)

        self._game = OthelloGame()
        self._last_info: Dict[str, np.ndarray] = {}

    @property
    def game(self) -> OthelloGame:
        return self._game

    @property
    def state(self) -> GameState:
        return self._game.state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._game.reset()
        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        mover = self._game.current_player
        move = decode_move(int(action_index))
        accepted = self._game.commit_move(move.row, move.col, mover)
        if not accepted and self._enforce_legal:
            raise IllegalMoveError(f"Illegal move {move.as_tuple()} for {mover.name}.")

        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info

        result = self._game.state.result
        reward = self._compute_reward(result)
        terminated = result != GameResult.ONGOING
        truncated = False

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        return legal_move_mask(self._game.state)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._render_ascii()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        state = self._game.state
        return {"board": build_board_tensor(state), "aux": build_aux_vector(state)}

    def _build_info(self) -> Dict[str, object]:
        black, white = self._game.score()
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": self._game.current_player,
            "score": (black, white),
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.BLACK_WIN:
            return 1.0
        if result == GameResult.WHITE_WIN:
            return -1.0
        return 0.0

    def _render_ascii(self) -> str:
        return render_board(self._game.board)


def render_board(board: np.ndarray) -> str:
    symbols = {0: ".", 1: "B", 2: "W"}
    rows = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
    for r in range(BOARD_SIZE):
        rows.append(f"{r} " + " ".join(symbols[int(board[r, c])] for c in range(BOARD_SIZE)))
    return "\n".join(rows)
