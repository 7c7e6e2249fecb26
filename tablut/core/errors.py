"""Failures raised by the Tablut rules and search engines."""


class TablutError(ValueError):
    """Base class for every failure raised by the ``tablut`` package."""


class OutOfRangeError(TablutError):
    """Square coordinates (or square notation) outside the 9x9 board."""


class IllegalMoveError(TablutError):
    """A move that may not be played in the current position."""


class UndoError(TablutError):
    """``undo`` called with no recorded move to take back."""


class NoLegalMoveError(TablutError):
    """The search was asked for a move where the side to move has none."""
