"""Feature extraction helpers for Tablut boards."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    board_to_numpy,
    build_aux_vector,
    build_board_tensor,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "board_to_numpy",
    "build_aux_vector",
    "build_board_tensor",
]
