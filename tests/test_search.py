from types import SimpleNamespace

import pytest

from tablut.core import Board, NoLegalMoveError, Piece, Side, parse_move
from tablut.search import (
    WILL_WIN_VALUE,
    WINNING_VALUE,
    AlphaBetaSearch,
    SearchConfig,
    find_move,
    max_depth,
    static_score,
)


def empty_board(turn: Side) -> Board:
    board = Board()
    board.clear(turn)
    return board


def snapshot(board: Board):
    return (
        board.encoded_board(),
        board.move_count,
        board.winner,
        board.repeated_position,
        board.last_move,
        board.legal_moves(board.turn),
    )


def test_depth_schedule() -> None:
    assert max_depth(SimpleNamespace(move_count=0)) == 1
    assert max_depth(SimpleNamespace(move_count=39)) == 1
    assert max_depth(SimpleNamespace(move_count=40)) == 2
    assert max_depth(SimpleNamespace(move_count=85)) == 3
    assert max_depth(SimpleNamespace(move_count=200), SearchConfig(max_depth=2)) == 2
    assert max_depth(SimpleNamespace(move_count=0), SearchConfig(fixed_depth=3)) == 3


def test_static_score() -> None:
    board = Board()
    # 9 white pieces, 16 black, king four squares from the edge.
    assert static_score(board) == 8 * 9 - 8 * 16 + 10 * 4

    won = empty_board(Side.WHITE)
    won.put(Piece.KING, "e2")
    won.put(Piece.BLACK, "h8")
    won.make_move("e2-a2")
    assert static_score(won) == WINNING_VALUE


def test_find_move_on_initial_board() -> None:
    board = Board()
    before = snapshot(board)
    move = find_move(board)
    assert move in board.legal_moves(Side.BLACK)
    assert snapshot(board) == before
    assert find_move(Board()) is move


def test_search_leaves_board_untouched_at_depth_two() -> None:
    board = empty_board(Side.BLACK)
    board.put(Piece.KING, "d4")
    board.put(Piece.WHITE, "f3")
    board.put(Piece.BLACK, "b2")
    board.put(Piece.BLACK, "g6")
    board.put(Piece.BLACK, "c8")
    before = snapshot(board)

    search = AlphaBetaSearch(SearchConfig(fixed_depth=2))
    result = search.run(board)
    assert snapshot(board) == before
    assert result.depth == 2
    assert result.nodes > 1
    assert result.move in board.legal_moves(Side.BLACK)
    assert AlphaBetaSearch(SearchConfig(fixed_depth=2)).run(board).move is result.move


def test_black_captures_the_king() -> None:
    board = empty_board(Side.BLACK)
    board.put(Piece.KING, "c3")
    board.put(Piece.BLACK, "b3")
    board.put(Piece.BLACK, "d1")
    result = AlphaBetaSearch().run(board)
    assert result.move == parse_move("d1-d3")
    assert result.score == -WINNING_VALUE
    assert result.is_decisive


def test_white_escapes_with_last_equal_move() -> None:
    board = empty_board(Side.WHITE)
    board.put(Piece.KING, "e2")
    board.put(Piece.BLACK, "h8")
    result = AlphaBetaSearch().run(board)
    # e2-e9, e2-i2, e2-e1 and e2-a2 all win; ties keep the last one generated.
    assert result.move == parse_move("e2-a2")
    assert result.score >= WILL_WIN_VALUE
    board.make_move(result.move)
    assert board.winner is Side.WHITE


def test_no_legal_move_raises() -> None:
    board = empty_board(Side.BLACK)
    board.put(Piece.KING, "e5")
    with pytest.raises(NoLegalMoveError):
        find_move(board)


def test_decided_game_raises() -> None:
    board = empty_board(Side.WHITE)
    board.put(Piece.KING, "e2")
    board.put(Piece.BLACK, "h8")
    board.make_move("e2-a2")
    with pytest.raises(NoLegalMoveError):
        find_move(board)
