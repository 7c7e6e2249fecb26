"""Alpha-beta search for automated Tablut players."""

from .alphabeta import (
    INFTY,
    WILL_WIN_VALUE,
    WINNING_VALUE,
    AlphaBetaSearch,
    SearchConfig,
    SearchResult,
    find_move,
    max_depth,
    static_score,
)

__all__ = [
    "INFTY",
    "WILL_WIN_VALUE",
    "WINNING_VALUE",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "find_move",
    "max_depth",
    "static_score",
]
