"""Gymnasium environment wrapping the Tablut rules engine."""

from .gym_env import TablutEnv

__all__ = ["TablutEnv"]
