from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from tablut.core import Board, Side, parse_move
from tablut.players import Player

PlayerFactory = Callable[[Board, Side], Player]


@dataclass
class GameRecord:
    winner: Optional[Side]
    moves: List[str] = field(default_factory=list)
    repeated: bool = False

    @property
    def length(self) -> int:
        return len(self.moves)


@dataclass
class EvaluationResult:
    games_played: int
    white_wins: int
    black_wins: int
    unfinished: int
    average_length: float

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)


def play_game(
    white: Player,
    black: Player,
    *,
    board: Optional[Board] = None,
    max_moves: Optional[int] = None,
) -> GameRecord:
    """Alternate ``white`` and ``black`` on ``board`` until someone wins or ``max_moves`` is reached.

    Both players must already be bound to ``board``.
    """
    board = board or white.board
    if black.board is not board or white.board is not board:
        raise ValueError("Both players must play on the same board.")

    record = GameRecord(winner=None)
    while board.winner is None:
        if max_moves is not None and record.length >= max_moves:
            break
        player = white if board.turn is Side.WHITE else black
        move = parse_move(player.my_move())
        board.make_move(move)
        record.moves.append(str(move))

    record.winner = board.winner
    record.repeated = board.repeated_position
    return record


def evaluate_players(
    white_factory: PlayerFactory,
    black_factory: PlayerFactory,
    *,
    games: int,
    max_moves: Optional[int] = None,
    on_game_end: Optional[Callable[[GameRecord], None]] = None,
) -> EvaluationResult:
    white_wins = 0
    black_wins = 0
    unfinished = 0
    total_moves = 0

    for _ in range(games):
        board = Board()
        record = play_game(
            white_factory(board, Side.WHITE),
            black_factory(board, Side.BLACK),
            board=board,
            max_moves=max_moves,
        )
        total_moves += record.length
        if record.winner is Side.WHITE:
            white_wins += 1
        elif record.winner is Side.BLACK:
            black_wins += 1
        else:
            unfinished += 1
        if on_game_end is not None:
            on_game_end(record)

    return EvaluationResult(
        games_played=games,
        white_wins=white_wins,
        black_wins=black_wins,
        unfinished=unfinished,
        average_length=total_moves / max(1, games),
    )
