"""Core game logic for Tablut."""

from .board import Board, MoveRecord
from .errors import (
    IllegalMoveError,
    NoLegalMoveError,
    OutOfRangeError,
    TablutError,
    UndoError,
)
from .rules import (
    INITIAL_ATTACKERS,
    INITIAL_DEFENDERS,
    CaptureResult,
    enumerate_legal_moves,
    initialize_grid,
    resolve_captures,
)
from .squares import (
    BOARD_SIZE,
    MOVE_INDEX_SIZE,
    NTHRONE,
    ETHRONE,
    STHRONE,
    WTHRONE,
    SQUARES,
    THRONE,
    THRONE_NEIGHBORS,
    Move,
    Square,
    decode_move,
    encode_move,
    mv,
    parse_move,
    parse_square,
    rook_rays,
    sq,
)
from .state import Piece, Side, piece_from_symbol

__all__ = [
    "Board",
    "MoveRecord",
    "TablutError",
    "OutOfRangeError",
    "IllegalMoveError",
    "UndoError",
    "NoLegalMoveError",
    "INITIAL_ATTACKERS",
    "INITIAL_DEFENDERS",
    "CaptureResult",
    "enumerate_legal_moves",
    "initialize_grid",
    "resolve_captures",
    "BOARD_SIZE",
    "MOVE_INDEX_SIZE",
    "SQUARES",
    "THRONE",
    "NTHRONE",
    "ETHRONE",
    "STHRONE",
    "WTHRONE",
    "THRONE_NEIGHBORS",
    "Move",
    "Square",
    "decode_move",
    "encode_move",
    "mv",
    "parse_move",
    "parse_square",
    "rook_rays",
    "sq",
    "Piece",
    "Side",
    "piece_from_symbol",
]
