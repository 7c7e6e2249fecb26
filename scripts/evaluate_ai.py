#!/usr/bin/env python3
"""Play the alpha-beta player against a baseline and report the results as JSON."""

import argparse
import json
from pathlib import Path
from typing import Dict

import numpy as np
import yaml
from tqdm.auto import tqdm

from tablut import AIPlayer, RandomPlayer, SearchConfig, Side
from tablut.evaluation import evaluate_players


def load_yaml_config(path_str: str) -> Dict:
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--games", type=int)
    parser.add_argument("--max-moves", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--ai-side", choices=["white", "black"])
    parser.add_argument("--opponent", choices=["random", "ai"])
    parser.add_argument("--depth", type=int, help="Fixed search depth for the AI")
    args = parser.parse_args()

    cfg = load_yaml_config(args.config)
    match_cfg = cfg.get("match") or {}
    games = args.games if args.games is not None else match_cfg.get("games", 10)
    max_moves = args.max_moves if args.max_moves is not None else match_cfg.get("max_moves", 200)
    seed = args.seed if args.seed is not None else match_cfg.get("seed")
    ai_side = args.ai_side or match_cfg.get("ai_side", "white")
    opponent = args.opponent or match_cfg.get("opponent", "random")

    search_cfg = dict(cfg.get("search") or {})
    if args.depth is not None:
        search_cfg["fixed_depth"] = args.depth
    search_config = SearchConfig(**search_cfg)

    rng = np.random.default_rng(seed)

    def ai_factory(board, side):
        return AIPlayer(board, side, search_config)

    def opponent_factory(board, side):
        if opponent == "ai":
            return AIPlayer(board, side, search_config)
        return RandomPlayer(board, side, rng)

    if ai_side == "white":
        white_factory, black_factory = ai_factory, opponent_factory
    else:
        white_factory, black_factory = opponent_factory, ai_factory

    with tqdm(total=games, desc="Games") as progress:
        result = evaluate_players(
            white_factory,
            black_factory,
            games=games,
            max_moves=max_moves,
            on_game_end=lambda record: progress.update(1),
        )

    ai = Side.WHITE if ai_side == "white" else Side.BLACK
    output = {
        "ai_side": str(ai),
        "opponent": opponent,
        "games": result.games_played,
        "white_wins": result.white_wins,
        "black_wins": result.black_wins,
        "unfinished": result.unfinished,
        "average_length": result.average_length,
        "ai_winrate": result.winrate_white() if ai is Side.WHITE else result.winrate_black(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
