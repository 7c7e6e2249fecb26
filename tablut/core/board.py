from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple, Union

import numpy as np

from .errors import IllegalMoveError, OutOfRangeError, UndoError
from .rules import (
    GridArray,
    empty_grid,
    enumerate_legal_moves,
    initialize_grid,
    is_legal_move,
    iter_legal_moves,
    king_square,
    piece_at,
    resolve_captures,
    side_squares,
)
from .squares import BOARD_SIZE, COLUMN_LETTERS, Move, Square, mv, parse_move, parse_square, sq
from .state import Piece, Side

SquareLike = Union[Square, str]
MoveLike = Union[Move, str]


@dataclass(frozen=True)
class MoveRecord:
    """Everything ``undo`` needs to restore the position before a move."""

    grid: GridArray
    previous_move: Optional[Move]
    previous_winner: Optional[Side]
    previous_repeated: bool
    captured: Tuple[Square, ...] = ()


class Board:
    """A Tablut game: the grid, whose turn it is, and the undo history.

    The board changes only through :meth:`make_move` and :meth:`undo` (plus the
    :meth:`put` / :meth:`clear` / :meth:`set_turn` helpers used to set up
    positions). Every failing call leaves it untouched.
    """

    def __init__(self) -> None:
        self.init()

    def init(self) -> None:
        """Reset to the initial position with black to move."""
        self._grid = initialize_grid()
        self._reset_game_status(Side.BLACK)

    def _reset_game_status(self, turn: Side) -> None:
        self._turn = turn
        self._move_count = 0
        self._winner: Optional[Side] = None
        self._repeated = False
        self._last_move: Optional[Move] = None
        self._history: List[MoveRecord] = []
        self._positions: Counter[bytes] = Counter()

    def copy(self) -> "Board":
        """An independent board in the same position, without undo history."""
        board = Board.__new__(Board)
        board.copy_from(self)
        return board

    def copy_from(self, model: "Board") -> None:
        if model is self:
            return
        self._grid = model._grid.copy()
        self._reset_game_status(model._turn)
        self._move_count = model._move_count
        self._winner = model._winner
        self._repeated = model._repeated
        self._last_move = model._last_move

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    @property
    def turn(self) -> Side:
        return self._turn

    @property
    def winner(self) -> Optional[Side]:
        return self._winner

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def repeated_position(self) -> bool:
        return self._repeated

    @property
    def last_move(self) -> Optional[Move]:
        return self._last_move

    @property
    def last_captures(self) -> Tuple[Square, ...]:
        """Squares emptied by captures on the most recent undoable move."""
        if not self._history:
            return ()
        return self._history[-1].captured

    @property
    def grid(self) -> GridArray:
        """Read-only view of the grid, indexed ``[row, col]``."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def king_position(self) -> Optional[Square]:
        return king_square(self._grid)

    @property
    def is_game_over(self) -> bool:
        return self._winner is not None

    def get(self, square: Union[SquareLike, int], row: Optional[int] = None) -> Piece:
        """Contents of a square, given as a Square, notation such as ``"e5"`` or ``(col, row)``."""
        if row is not None:
            if isinstance(square, (Square, str)):
                raise TypeError("A column number is required when a row is given.")
            return piece_at(self._grid, sq(square, row))
        return piece_at(self._grid, _to_square(square))

    def piece_locations(self, side: Side) -> Set[Square]:
        """Squares occupied by ``side``; white includes the king."""
        return set(side_squares(self._grid, side))

    def count(self, side: Side) -> int:
        return int(np.count_nonzero(np.isin(self._grid, [int(p) for p in side.pieces])))

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def is_legal(self, move_or_from: Union[MoveLike, Square], to: Optional[SquareLike] = None) -> bool:
        """Whether a move (or, with a single square, a starting square) is legal for the side to move."""
        if to is None and isinstance(move_or_from, str) and "-" not in move_or_from:
            try:
                move_or_from = parse_square(move_or_from)
            except OutOfRangeError:
                return False
        if to is None and isinstance(move_or_from, Square):
            return piece_at(self._grid, move_or_from).side is self._turn
        try:
            move = _to_move(move_or_from, to)
        except (IllegalMoveError, OutOfRangeError):
            return False
        return is_legal_move(self._grid, self._turn, move.from_sq, move.to_sq)

    def legal_moves(self, side: Optional[Side] = None) -> List[Move]:
        """All legal moves for ``side`` (default: the side to move), ignoring whose turn it is."""
        return enumerate_legal_moves(self._grid, side or self._turn)

    def has_move(self, side: Optional[Side] = None) -> bool:
        return next(iter_legal_moves(self._grid, side or self._turn), None) is not None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def make_move(self, move_or_from: Union[MoveLike, Square], to: Optional[SquareLike] = None) -> None:
        move = _to_move(move_or_from, to)
        if self._winner is not None:
            raise IllegalMoveError(f"The game is over; {self._winner} has won.")
        if not is_legal_move(self._grid, self._turn, move.from_sq, move.to_sq):
            raise IllegalMoveError(f"Illegal move {move} for {self._turn}.")

        snapshot = self._grid.copy()
        mover = self._turn
        from_sq, to_sq = move.from_sq, move.to_sq
        grid = self._grid
        grid[to_sq.row, to_sq.col] = grid[from_sq.row, from_sq.col]
        grid[from_sq.row, from_sq.col] = Piece.EMPTY

        captured: Tuple[Square, ...] = ()
        winner: Optional[Side] = None
        repeated = False
        if grid[to_sq.row, to_sq.col] == Piece.KING and to_sq.is_edge:
            winner = Side.WHITE
        else:
            result = resolve_captures(grid, to_sq, mover)
            captured = result.captured
            if result.king_captured:
                winner = Side.BLACK

        self._history.append(
            MoveRecord(
                grid=snapshot,
                previous_move=self._last_move,
                previous_winner=self._winner,
                previous_repeated=self._repeated,
                captured=captured,
            )
        )
        self._positions[snapshot.tobytes()] += 1
        if winner is None and self._positions[grid.tobytes()] > 0:
            repeated = True
            winner = mover.opponent

        self._last_move = move
        self._move_count += 1
        self._turn = mover.opponent
        if winner is None and not self.has_move(self._turn):
            winner = self._turn.opponent
        self._winner = winner
        self._repeated = repeated

    def undo(self) -> None:
        """Take back the last move."""
        if self._move_count == 0 or not self._history:
            raise UndoError("No move to undo: at the start of the recorded game.")
        record = self._history.pop()
        key = record.grid.tobytes()
        self._positions[key] -= 1
        if self._positions[key] <= 0:
            del self._positions[key]
        self._grid = record.grid
        self._move_count -= 1
        self._turn = self._turn.opponent
        self._last_move = record.previous_move
        self._winner = record.previous_winner
        self._repeated = record.previous_repeated

    def clear_undo(self) -> None:
        """Forget the undo history and seen positions; the position itself is unchanged."""
        self._history.clear()
        self._positions.clear()

    # ------------------------------------------------------------------
    # Position setup
    # ------------------------------------------------------------------
    def put(self, piece: Piece, square: SquareLike) -> None:
        """Set ``square`` to ``piece`` without recording anything for undo."""
        target = _to_square(square)
        self._grid[target.row, target.col] = piece

    def clear(self, turn: Optional[Side] = None) -> None:
        """Empty the board and every counter; ``turn`` (default: unchanged) moves next."""
        self._grid = empty_grid()
        self._reset_game_status(turn or self._turn)

    def set_turn(self, side: Side) -> None:
        self._turn = side

    # ------------------------------------------------------------------
    # Text forms
    # ------------------------------------------------------------------
    def encoded_board(self) -> str:
        """Side to move followed by the 81 piece symbols in square-index order."""
        symbols = "".join(Piece(int(value)).symbol for value in self._grid.ravel())
        return self._turn.value + symbols

    def to_string(self, coordinates: bool = True) -> str:
        lines = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            prefix = f"{row + 1:2d}" if coordinates else "  "
            cells = "".join(f" {Piece(int(self._grid[row, col])).symbol}" for col in range(BOARD_SIZE))
            lines.append(prefix + cells)
        if coordinates:
            lines.append("  " + "".join(f" {letter}" for letter in COLUMN_LETTERS))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_string(coordinates=True)

    def __repr__(self) -> str:
        return (
            f"Board(turn={self._turn}, winner={self._winner}, moves={self._move_count})\n"
            f"{self.to_string()}"
        )


def _to_square(square: SquareLike) -> Square:
    if isinstance(square, Square):
        return square
    return parse_square(square)


def _to_move(move_or_from: Union[MoveLike, Square], to: Optional[SquareLike]) -> Move:
    if isinstance(move_or_from, Move):
        return move_or_from
    if to is None:
        if isinstance(move_or_from, str):
            return parse_move(move_or_from)
        raise IllegalMoveError("A destination square is required.")
    return mv(_to_square(move_or_from), _to_square(to))
