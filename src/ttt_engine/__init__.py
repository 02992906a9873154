"""ttt_engine package.

Move selection for tic-tac-toe: outcome detection, tactics, exhaustive
search, tiered strategies, an optional external move source, and a CLI.

Convenience imports are exposed for common workflows.
"""

from .engine import normalize_tier, select_move
from .game_basics import get_outcome, parse_board
from .solver import best_move, score_moves
from .tactics import find_winning_move

__all__ = [
    "select_move",
    "normalize_tier",
    "get_outcome",
    "parse_board",
    "best_move",
    "score_moves",
    "find_winning_move",
]
