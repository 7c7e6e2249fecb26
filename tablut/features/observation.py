from __future__ import annotations

from typing import Tuple

import numpy as np

from tablut.core import BOARD_SIZE, THRONE, Board, Piece, Side

BOARD_CHANNELS = 4  # white defenders, black attackers, king, throne
AUX_VECTOR_SIZE = 2  # side to move one-hot (white, black)

_PIECE_CHANNELS = ((0, Piece.WHITE), (1, Piece.BLACK), (2, Piece.KING))


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board tensor with shape (4, 9, 9) channel-first, indexed [channel, row, col]."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    grid = board.grid
    for channel, piece in _PIECE_CHANNELS:
        tensor[channel] = grid == int(piece)
    tensor[3, THRONE.row, THRONE.col] = 1.0
    return tensor


def build_aux_vector(board: Board) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[0 if board.turn is Side.WHITE else 1] = 1.0
    return aux


def board_to_numpy(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(board), build_aux_vector(board)
