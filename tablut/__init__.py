"""Tablut rules engine and alpha-beta player."""

from . import core, env, evaluation, features, search
from .core import Board, Move, Piece, Side, Square, mv, parse_move, parse_square, sq
from .env import TablutEnv
from .evaluation import EvaluationResult, evaluate_players, play_game
from .features import AUX_VECTOR_SIZE, BOARD_CHANNELS, board_to_numpy, build_aux_vector, build_board_tensor
from .players import AIPlayer, ManualPlayer, Player, RandomPlayer
from .search import AlphaBetaSearch, SearchConfig, find_move, static_score

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "search",
    "Board",
    "Move",
    "Piece",
    "Side",
    "Square",
    "mv",
    "parse_move",
    "parse_square",
    "sq",
    "TablutEnv",
    "EvaluationResult",
    "evaluate_players",
    "play_game",
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "board_to_numpy",
    "build_aux_vector",
    "build_board_tensor",
    "AIPlayer",
    "ManualPlayer",
    "Player",
    "RandomPlayer",
    "AlphaBetaSearch",
    "SearchConfig",
    "find_move",
    "static_score",
]
