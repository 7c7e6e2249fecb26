"""Participants in a game: people at the console and automatic players."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from tablut.core import Board, NoLegalMoveError, Side
from tablut.search import AlphaBetaSearch, SearchConfig


class Player:
    """A party playing ``side`` on ``board``; produces moves in ``<col><row>-<col><row>`` notation."""

    def __init__(self, board: Board, side: Side) -> None:
        self.board = board
        self.side = side

    def my_move(self) -> str:
        raise NotImplementedError

    def is_manual(self) -> bool:
        return False


class ManualPlayer(Player):
    """Moves come from ``source``, typically a prompt read by the console shell."""

    def __init__(self, board: Board, side: Side, source: Callable[[], str]) -> None:
        super().__init__(board, side)
        self._source = source

    def my_move(self) -> str:
        return self._source()

    def is_manual(self) -> bool:
        return True


class AIPlayer(Player):
    def __init__(self, board: Board, side: Side, config: Optional[SearchConfig] = None) -> None:
        super().__init__(board, side)
        self.search = AlphaBetaSearch(config)

    def my_move(self) -> str:
        return str(self.search.find_move(self.board))


class RandomPlayer(Player):
    """Uniformly random legal moves; the baseline opponent in evaluation matches."""

    def __init__(self, board: Board, side: Side, rng: Optional[np.random.Generator] = None) -> None:
        super().__init__(board, side)
        self.rng = rng or np.random.default_rng()

    def my_move(self) -> str:
        moves = self.board.legal_moves(self.board.turn)
        if not moves:
            raise NoLegalMoveError(f"{self.board.turn} has no legal move.")
        return str(moves[int(self.rng.integers(len(moves)))])
