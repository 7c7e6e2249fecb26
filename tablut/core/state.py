from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional, Tuple


class Side(Enum):
    WHITE = "W"
    BLACK = "B"

    @property
    def opponent(self) -> "Side":
        return Side.BLACK if self is Side.WHITE else Side.WHITE

    @property
    def pieces(self) -> Tuple["Piece", ...]:
        """Piece kinds that belong to this side."""
        if self is Side.WHITE:
            return (Piece.WHITE, Piece.KING)
        return (Piece.BLACK,)

    def __str__(self) -> str:
        return self.name.capitalize()


class Piece(IntEnum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2
    KING = 3

    @property
    def side(self) -> Optional[Side]:
        if self in (Piece.WHITE, Piece.KING):
            return Side.WHITE
        if self == Piece.BLACK:
            return Side.BLACK
        return None

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Piece.EMPTY: "-", Piece.WHITE: "W", Piece.BLACK: "B", Piece.KING: "K"}
_PIECES_BY_SYMBOL = {symbol: piece for piece, symbol in _SYMBOLS.items()}


def piece_from_symbol(symbol: str) -> Piece:
    try:
        return _PIECES_BY_SYMBOL[symbol]
    except KeyError:
        raise ValueError(f"Unknown piece symbol {symbol!r}.") from None
