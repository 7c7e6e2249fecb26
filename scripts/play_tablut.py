#!/usr/bin/env python3
"""Play Tablut at the console against the alpha-beta player, or watch it play itself."""

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Optional

import yaml

from tablut import AIPlayer, Board, ManualPlayer, Player, SearchConfig, Side

HELP_TEXT = """Commands:
  <col><row>-<col><row>  play a move, e.g. e3-e1 (columns a-i, rows 1-9)
  new                    start a new game
  undo                   take back the last move
  dump                   print the board
  auto white|black       let the computer play that side
  manual white|black     play that side yourself
  help                   show this text
  quit                   leave the program"""


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_search_config(cfg: Dict, args: argparse.Namespace) -> SearchConfig:
    search_cfg = dict(cfg.get("search") or {})
    if getattr(args, "depth", None) is not None:
        search_cfg["fixed_depth"] = args.depth
    return SearchConfig(**search_cfg)


def parse_side(text: str) -> Side:
    name = text.strip().lower()
    if name == "white":
        return Side.WHITE
    if name == "black":
        return Side.BLACK
    raise ValueError(f"Unknown side {text!r}; use white or black.")


def format_board(board: Board) -> str:
    return "===\n" + board.to_string() + "==="


@dataclass
class Session:
    search_config: SearchConfig
    output: Callable[[str], None] = print
    board: Board = field(default_factory=Board)
    auto_sides: Dict[Side, bool] = field(
        default_factory=lambda: {Side.WHITE: True, Side.BLACK: False}
    )
    announced: bool = False
    running: bool = True

    def player_for(self, side: Side, source: Callable[[], str]) -> Player:
        if self.auto_sides[side]:
            return AIPlayer(self.board, side, self.search_config)
        return ManualPlayer(self.board, side, source)

    def announce_winner(self) -> None:
        if self.board.winner is not None and not self.announced:
            self.output(f"{self.board.winner} wins.")
            self.announced = True


def handle_command(session: Session, line: str) -> None:
    """Apply one line of console input to ``session``; errors are reported, not raised."""
    words = line.strip().split()
    if not words:
        return
    command = words[0].lower()
    try:
        if command in {"quit", "exit", "q"}:
            session.running = False
        elif command == "new":
            session.board.init()
            session.announced = False
        elif command == "undo":
            session.board.undo()
            # Also take back automatic replies, or the AI would replay them at once.
            while session.board.move_count > 0 and session.auto_sides[session.board.turn]:
                session.board.undo()
            session.announced = False
        elif command == "dump":
            session.output(format_board(session.board))
        elif command == "help":
            session.output(HELP_TEXT)
        elif command in {"auto", "manual"}:
            if len(words) != 2:
                raise ValueError(f"Usage: {command} white|black")
            session.auto_sides[parse_side(words[1])] = command == "auto"
        else:
            session.board.make_move(line.strip())
            session.announce_winner()
    except ValueError as exc:
        session.output(f"Error: {exc}")


def step(session: Session, read_line: Callable[[], str]) -> None:
    """Let the side to move act once: the AI plays, or one line is read from a person."""
    board = session.board
    if board.winner is None and session.auto_sides[board.turn]:
        player = session.player_for(board.turn, read_line)
        move = player.my_move()
        session.output(f"* {move}")
        board.make_move(move)
        session.announce_winner()
        return
    if board.winner is None:
        line = session.player_for(board.turn, read_line).my_move()
    else:
        line = read_line()
    handle_command(session, line)


def play_interactive(args: argparse.Namespace) -> None:
    cfg = load_yaml_config(args.config)
    session = Session(search_config=build_search_config(cfg, args))
    human_side = args.human_side or (cfg.get("play") or {}).get("human_side", "black")
    session.auto_sides = {
        Side.WHITE: human_side not in {"white", "both"},
        Side.BLACK: human_side not in {"black", "both"},
    }

    def read_line() -> str:
        try:
            return input(f"{session.board.turn}> ")
        except EOFError:
            return "quit"

    print("Tablut. Type 'help' for commands.")
    print(format_board(session.board))
    while session.running:
        step(session, read_line)

    summary = {
        "moves": session.board.move_count,
        "winner": str(session.board.winner) if session.board.winner else None,
        "repeated_position": session.board.repeated_position,
        "encoded_board": session.board.encoded_board(),
    }
    print(json.dumps(summary, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Tablut in the console.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--human-side", choices=["white", "black", "both", "none"])
    parser.add_argument("--depth", type=int, help="Fixed search depth (overrides the schedule)")
    args = parser.parse_args()
    try:
        play_interactive(args)
    except KeyboardInterrupt:
        sys.exit(1)


if __name__ == "__main__":
    main()
