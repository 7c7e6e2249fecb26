from tablut.core import (
    INITIAL_ATTACKERS,
    INITIAL_DEFENDERS,
    Piece,
    Side,
    enumerate_legal_moves,
    initialize_grid,
    resolve_captures,
    sq,
)
from tablut.core.rules import empty_grid, is_unblocked_move, king_square


def put(grid, piece, col, row) -> None:
    grid[row, col] = piece


def test_initial_grid_layout() -> None:
    grid = initialize_grid()
    assert (grid == Piece.BLACK).sum() == len(INITIAL_ATTACKERS) == 16
    assert (grid == Piece.WHITE).sum() == len(INITIAL_DEFENDERS) == 8
    assert king_square(grid) is sq(4, 4)


def test_unblocked_move_requires_clear_path() -> None:
    grid = empty_grid()
    put(grid, Piece.BLACK, 3, 3)
    put(grid, Piece.WHITE, 3, 5)
    assert is_unblocked_move(grid, sq(3, 3), sq(3, 4))
    assert not is_unblocked_move(grid, sq(3, 3), sq(3, 5))
    assert not is_unblocked_move(grid, sq(3, 3), sq(3, 6))
    assert not is_unblocked_move(grid, sq(3, 3), sq(4, 4))


def test_sandwich_capture_on_both_sides() -> None:
    grid = empty_grid()
    put(grid, Piece.BLACK, 3, 2)
    put(grid, Piece.WHITE, 2, 2)
    put(grid, Piece.BLACK, 1, 2)
    put(grid, Piece.WHITE, 4, 2)
    put(grid, Piece.BLACK, 5, 2)

    result = resolve_captures(grid, sq(3, 2), Side.BLACK)

    assert set(result.captured) == {sq(2, 2), sq(4, 2)}
    assert not result.king_captured
    assert grid[2, 2] == Piece.EMPTY
    assert grid[2, 4] == Piece.EMPTY


def test_capture_at_board_edge_skips_missing_anchor() -> None:
    grid = empty_grid()
    put(grid, Piece.WHITE, 0, 1)
    put(grid, Piece.BLACK, 0, 0)

    result = resolve_captures(grid, sq(0, 0), Side.BLACK)

    assert result.captured == ()
    assert grid[1, 0] == Piece.WHITE


def test_king_needs_four_attackers_on_throne() -> None:
    grid = empty_grid()
    put(grid, Piece.KING, 4, 4)
    for col, row in ((4, 5), (5, 4), (3, 4)):
        put(grid, Piece.BLACK, col, row)
    put(grid, Piece.BLACK, 4, 3)

    result = resolve_captures(grid, sq(4, 3), Side.BLACK)

    assert result.king_captured
    assert king_square(grid) is None


def test_legal_moves_stop_at_pieces() -> None:
    grid = empty_grid()
    put(grid, Piece.BLACK, 0, 0)
    put(grid, Piece.WHITE, 0, 2)
    put(grid, Piece.WHITE, 3, 0)
    moves = [str(m) for m in enumerate_legal_moves(grid, Side.BLACK)]
    assert moves == ["a1-a2", "a1-b1", "a1-c1"]
