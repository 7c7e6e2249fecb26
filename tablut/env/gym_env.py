from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from tablut.core import (
    BOARD_SIZE,
    MOVE_INDEX_SIZE,
    Board,
    Side,
    decode_move,
    encode_move,
)
from tablut.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
)


class TablutEnv(gym.Env):
    """Both sides play through ``step``; rewards are from white's point of view."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        max_moves: Optional[int] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._max_moves = max_moves
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(MOVE_INDEX_SIZE)

        self.board = Board()

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if options and "max_moves" in options:
            self._max_moves = options["max_moves"]
        self.board = Board()
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        move = decode_move(int(action_index))
        if self._enforce_legal and not self.board.is_legal(move):
            raise ValueError(f"Illegal action {move} provided and enforce_legal_actions=True.")
        self.board.make_move(move)

        reward = self._compute_reward(self.board.winner)
        terminated = self.board.winner is not None
        truncated = (
            not terminated
            and self._max_moves is not None
            and self.board.move_count >= self._max_moves
        )
        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self.board.winner is not None:
            return mask
        for move in self.board.legal_moves(self.board.turn):
            mask[encode_move(move)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self.board.to_string()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {
            "board": build_board_tensor(self.board),
            "aux": build_aux_vector(self.board),
        }

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "encoded_board": self.board.encoded_board(),
        }

    def _compute_reward(self, winner: Optional[Side]) -> float:
        if winner is Side.WHITE:
            return 1.0
        if winner is Side.BLACK:
            return -1.0
        return 0.0
