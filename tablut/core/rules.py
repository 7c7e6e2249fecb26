from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .squares import (
    BOARD_SIZE,
    DIRECTIONS,
    ROOK_RAYS,
    SQUARES,
    THRONE,
    THRONE_NEIGHBORS,
    Move,
    Square,
    mv,
    sq,
)
from .state import Piece, Side

GridArray = NDArray[np.int8]  # shape (9, 9), indexed [row, col], values are Piece

INITIAL_ATTACKERS: Tuple[Square, ...] = (
    sq(0, 3), sq(0, 4), sq(0, 5), sq(1, 4),
    sq(8, 3), sq(8, 4), sq(8, 5), sq(7, 4),
    sq(3, 0), sq(4, 0), sq(5, 0), sq(4, 1),
    sq(3, 8), sq(4, 8), sq(5, 8), sq(4, 7),
)
INITIAL_DEFENDERS: Tuple[Square, ...] = THRONE_NEIGHBORS + (
    sq(4, 6), sq(4, 2), sq(2, 4), sq(6, 4),
)


@dataclass(frozen=True)
class CaptureResult:
    captured: Tuple[Square, ...] = ()
    king_captured: bool = False


def empty_grid() -> GridArray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def initialize_grid() -> GridArray:
    grid = empty_grid()
    for square in INITIAL_DEFENDERS:
        grid[square.row, square.col] = Piece.WHITE
    for square in INITIAL_ATTACKERS:
        grid[square.row, square.col] = Piece.BLACK
    grid[THRONE.row, THRONE.col] = Piece.KING
    return grid


def piece_at(grid: GridArray, square: Square) -> Piece:
    return Piece(int(grid[square.row, square.col]))


def king_square(grid: GridArray) -> Optional[Square]:
    positions = np.argwhere(grid == Piece.KING)
    if len(positions) == 0:
        return None
    row, col = positions[0]
    return sq(int(col), int(row))


def side_squares(grid: GridArray, side: Side) -> List[Square]:
    """Squares holding ``side``'s pieces, in ascending square index."""
    mask = np.isin(grid.ravel(), [int(piece) for piece in side.pieces])
    return [SQUARES[int(index)] for index in np.flatnonzero(mask)]


def is_unblocked_move(grid: GridArray, from_sq: Square, to_sq: Square) -> bool:
    if not from_sq.is_rook_move(to_sq):
        return False
    for square in ROOK_RAYS[from_sq.index][from_sq.direction(to_sq)]:
        if grid[square.row, square.col] != Piece.EMPTY:
            return False
        if square == to_sq:
            return True
    return False


def is_legal_move(grid: GridArray, side: Side, from_sq: Square, to_sq: Square) -> bool:
    piece = piece_at(grid, from_sq)
    if piece.side is not side:
        return False
    if to_sq == THRONE and piece != Piece.KING:
        return False
    return is_unblocked_move(grid, from_sq, to_sq)


def iter_legal_moves(grid: GridArray, side: Side) -> Iterator[Move]:
    """Legal moves for ``side`` by source index, then direction N, E, S, W, then distance."""
    for origin in side_squares(grid, side):
        is_king = grid[origin.row, origin.col] == Piece.KING
        for ray in ROOK_RAYS[origin.index]:
            for target in ray:
                if grid[target.row, target.col] != Piece.EMPTY:
                    break
                if target == THRONE and not is_king:
                    continue
                yield mv(origin, target)


def enumerate_legal_moves(grid: GridArray, side: Side) -> List[Move]:
    return list(iter_legal_moves(grid, side))


def resolve_captures(grid: GridArray, to_sq: Square, mover: Side) -> CaptureResult:
    """Remove every enemy piece flanked by the piece that just arrived on ``to_sq``."""
    captured: List[Square] = []
    king_captured = False
    for direction in range(len(DIRECTIONS)):
        anchor = to_sq.neighbor(direction, 2)
        if anchor is None:
            continue
        victim_sq = to_sq.between(anchor)
        victim = piece_at(grid, victim_sq)
        if victim == Piece.EMPTY or victim.side is mover:
            continue
        if victim == Piece.KING:
            if not _king_is_surrounded(grid, victim_sq, anchor):
                continue
            king_captured = True
        elif not _is_hostile(grid, anchor, mover):
            continue
        grid[victim_sq.row, victim_sq.col] = Piece.EMPTY
        captured.append(victim_sq)
    return CaptureResult(captured=tuple(captured), king_captured=king_captured)


def _is_hostile(grid: GridArray, square: Square, mover: Side) -> bool:
    """Whether ``square`` acts as a flanker for ``mover``: a friendly piece or the empty throne."""
    piece = piece_at(grid, square)
    if piece.side is mover:
        return True
    return square == THRONE and piece == Piece.EMPTY


def _king_is_surrounded(grid: GridArray, king_sq: Square, anchor: Square) -> bool:
    if king_sq == THRONE:
        return all(piece_at(grid, s) == Piece.BLACK for s in THRONE_NEIGHBORS)
    if king_sq in THRONE_NEIGHBORS:
        # The throne itself is always hostile to a king standing next to it.
        return all(
            piece_at(grid, s) == Piece.BLACK for s in king_sq.neighbors() if s != THRONE
        )
    return _is_hostile(grid, anchor, Side.BLACK)
