"""Automated matches between Tablut players."""

from .match import EvaluationResult, GameRecord, evaluate_players, play_game

__all__ = ["EvaluationResult", "GameRecord", "evaluate_players", "play_game"]
