from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import IllegalMoveError, OutOfRangeError

BOARD_SIZE = 9
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE
MOVE_INDEX_SIZE = NUM_SQUARES * NUM_SQUARES

# Direction indices, in move-generation order.
NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))  # (dcol, drow)
DIRECTION_NAMES = ("N", "E", "S", "W")

COLUMN_LETTERS = "abcdefghi"
_SQUARE_PATTERN = re.compile(r"^([a-i])([1-9])$")
_MOVE_PATTERN = re.compile(r"^([a-i][1-9])-([a-i][1-9])$")


@dataclass(frozen=True)
class Square:
    """One of the 81 board squares. Obtain instances through :func:`sq`."""

    col: int
    row: int

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    @property
    def is_edge(self) -> bool:
        return self.col in (0, BOARD_SIZE - 1) or self.row in (0, BOARD_SIZE - 1)

    @property
    def is_throne(self) -> bool:
        return self.col == 4 and self.row == 4

    def is_rook_move(self, other: "Square") -> bool:
        return self != other and (self.col == other.col or self.row == other.row)

    def direction(self, other: "Square") -> int:
        """Direction index (NORTH..WEST) from this square towards ``other``."""
        if self.col == other.col and other.row > self.row:
            return NORTH
        if self.row == other.row and other.col > self.col:
            return EAST
        if self.col == other.col and other.row < self.row:
            return SOUTH
        return WEST

    def between(self, other: "Square") -> "Square":
        """The square separating this one from ``other`` two steps away on a rank or file."""
        dc = other.col - self.col
        dr = other.row - self.row
        if not ((abs(dc) == 2 and dr == 0) or (abs(dr) == 2 and dc == 0)):
            raise ValueError(f"{self} and {other} are not two squares apart on a rank or file.")
        return SQUARES[(self.row + dr // 2) * BOARD_SIZE + self.col + dc // 2]

    def neighbor(self, direction: int, distance: int = 1) -> Optional["Square"]:
        """Square ``distance`` steps away in ``direction``, or None off the board."""
        dc, dr = DIRECTIONS[direction]
        col = self.col + dc * distance
        row = self.row + dr * distance
        if not (_in_bounds(col) and _in_bounds(row)):
            return None
        return SQUARES[row * BOARD_SIZE + col]

    def neighbors(self) -> List["Square"]:
        return [s for s in (self.neighbor(d) for d in range(len(DIRECTIONS))) if s is not None]

    def __str__(self) -> str:
        return f"{COLUMN_LETTERS[self.col]}{self.row + 1}"

    def __repr__(self) -> str:
        return f"Square({self})"


def _in_bounds(value: int) -> bool:
    return 0 <= value < BOARD_SIZE


# Ordered by index: row-major from a1, b1, ... i9.
SQUARES: Tuple[Square, ...] = tuple(
    Square(col, row) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


def sq(col: int, row: int) -> Square:
    """The square at column ``col`` and row ``row`` (both 0..8)."""
    if not (_in_bounds(col) and _in_bounds(row)):
        raise OutOfRangeError(f"Square ({col}, {row}) is off the board.")
    return SQUARES[row * BOARD_SIZE + col]


def parse_square(text: str) -> Square:
    """The square written as ``text`` in ``<col><row>`` notation, e.g. ``"e5"``."""
    match = _SQUARE_PATTERN.match(text.strip())
    if match is None:
        raise OutOfRangeError(f"Not a square: {text!r}.")
    return sq(COLUMN_LETTERS.index(match.group(1)), int(match.group(2)) - 1)


def _build_rays() -> Tuple[Tuple[Tuple[Square, ...], ...], ...]:
    rays = []
    for square in SQUARES:
        per_direction = []
        for direction in range(len(DIRECTIONS)):
            ray: List[Square] = []
            distance = 1
            target = square.neighbor(direction, distance)
            while target is not None:
                ray.append(target)
                distance += 1
                target = square.neighbor(direction, distance)
            per_direction.append(tuple(ray))
        rays.append(tuple(per_direction))
    return tuple(rays)


# ROOK_RAYS[square.index][direction]: squares in increasing distance up to the edge.
ROOK_RAYS = _build_rays()


def rook_rays(square: Square) -> Tuple[Tuple[Square, ...], ...]:
    return ROOK_RAYS[square.index]


THRONE = sq(4, 4)
NTHRONE = sq(4, 5)
ETHRONE = sq(5, 4)
STHRONE = sq(4, 3)
WTHRONE = sq(3, 4)
THRONE_NEIGHBORS: Tuple[Square, ...] = (NTHRONE, ETHRONE, STHRONE, WTHRONE)


@dataclass(frozen=True)
class Move:
    """A rook-like slide. Obtain instances through :func:`mv` so each move is shared."""

    from_sq: Square
    to_sq: Square

    @property
    def index(self) -> int:
        return self.from_sq.index * NUM_SQUARES + self.to_sq.index

    def __str__(self) -> str:
        return f"{self.from_sq}-{self.to_sq}"

    def __repr__(self) -> str:
        return f"Move({self})"


def _build_move_table() -> List[Optional[Move]]:
    table: List[Optional[Move]] = [None] * MOVE_INDEX_SIZE
    for origin in SQUARES:
        for target in SQUARES:
            if origin.is_rook_move(target):
                table[origin.index * NUM_SQUARES + target.index] = Move(origin, target)
    return table


_MOVES = _build_move_table()


def mv(from_sq: Square, to_sq: Square) -> Move:
    """The move ``from_sq``-``to_sq``; fails unless the squares form a rook move."""
    move = _MOVES[from_sq.index * NUM_SQUARES + to_sq.index]
    if move is None:
        raise IllegalMoveError(f"{from_sq}-{to_sq} is not a rook move.")
    return move


def parse_move(text: str) -> Move:
    """The move written as ``text``, e.g. ``"e3-e1"``."""
    match = _MOVE_PATTERN.match(text.strip())
    if match is None:
        raise IllegalMoveError(f"Not a move: {text!r}.")
    return mv(parse_square(match.group(1)), parse_square(match.group(2)))


def encode_move(move: Move) -> int:
    return move.index


def decode_move(index: int) -> Move:
    if not 0 <= index < MOVE_INDEX_SIZE:
        raise IllegalMoveError("Move index out of range.")
    move = _MOVES[index]
    if move is None:
        raise IllegalMoveError(f"Move index {index} is not a rook move.")
    return move
