from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tablut.core import Board, Move, NoLegalMoveError, Side

# Score magnitude of a decided game (positive: white has won).
WINNING_VALUE = 1_000_000
# Magnitude of a win forced on the next move; kept below WINNING_VALUE so
# immediate wins are preferred to delayed ones.
WILL_WIN_VALUE = WINNING_VALUE - 20
# Larger than any score the search can return.
INFTY = WINNING_VALUE + 20

PIECE_VALUE = 8
KING_DISTANCE_VALUE = 10


@dataclass
class SearchConfig:
    depth_interval: int = 40
    base_depth: int = 1
    max_depth: Optional[int] = None
    fixed_depth: Optional[int] = None


@dataclass
class SearchResult:
    move: Move
    score: int
    depth: int
    nodes: int

    @property
    def is_decisive(self) -> bool:
        return abs(self.score) >= WILL_WIN_VALUE


def max_depth(board: Board, config: Optional[SearchConfig] = None) -> int:
    """Search depth for ``board``: one extra ply for every ``depth_interval`` moves played."""
    config = config or SearchConfig()
    if config.fixed_depth is not None:
        return config.fixed_depth
    depth = board.move_count // config.depth_interval + config.base_depth
    if config.max_depth is not None:
        depth = min(depth, config.max_depth)
    return depth


def static_score(board: Board) -> int:
    """Heuristic value of ``board`` from white's point of view."""
    if board.winner is Side.WHITE:
        return WINNING_VALUE
    if board.winner is Side.BLACK:
        return -WINNING_VALUE
    score = PIECE_VALUE * board.count(Side.WHITE) - PIECE_VALUE * board.count(Side.BLACK)
    king = board.king_position
    if king is not None:
        edge_distance = min(king.row, 8 - king.row, king.col, 8 - king.col)
        score += KING_DISTANCE_VALUE * edge_distance
    return score


class AlphaBetaSearch:
    """Depth-limited minimax with alpha-beta pruning; white maximises, black minimises.

    The search plays moves on the board it is given and undoes each one, so
    the board is left exactly as it was found. Among equally scored moves at
    the root the one generated last is kept.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()
        self._best_move: Optional[Move] = None
        self._nodes = 0

    def run(self, board: Board) -> SearchResult:
        if board.winner is not None:
            raise NoLegalMoveError(f"The game is already decided: {board.winner} has won.")
        if not board.has_move(board.turn):
            raise NoLegalMoveError(f"{board.turn} has no legal move.")

        depth = max(1, max_depth(board, self.config))
        sense = 1 if board.turn is Side.WHITE else -1
        self._best_move = None
        self._nodes = 0
        score = self._search(board, depth, True, sense, -INFTY, INFTY)
        if self._best_move is None:
            raise RuntimeError("Search finished without selecting a move.")
        return SearchResult(move=self._best_move, score=score, depth=depth, nodes=self._nodes)

    def find_move(self, board: Board) -> Move:
        return self.run(board).move

    # ------------------------------------------------------------------
    def _search(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> int:
        self._nodes += 1
        if depth == 0 or board.winner is not None:
            return static_score(board)

        if sense == 1:
            best = -INFTY
            for move in board.legal_moves(Side.WHITE):
                board.make_move(move)
                response = self._search(board, depth - 1, False, -1, alpha, beta)
                board.undo()
                if response >= best:
                    best = response
                    if save_move:
                        self._best_move = move
                alpha = max(alpha, best)
                if alpha >= beta:
                    break
        else:
            best = INFTY
            for move in board.legal_moves(Side.BLACK):
                board.make_move(move)
                response = self._search(board, depth - 1, False, 1, alpha, beta)
                board.undo()
                if response <= best:
                    best = response
                    if save_move:
                        self._best_move = move
                beta = min(beta, best)
                if alpha >= beta:
                    break
        return best


def find_move(board: Board, config: Optional[SearchConfig] = None) -> Move:
    """Best move for the side to move on ``board``."""
    return AlphaBetaSearch(config).find_move(board)
