"""
Move strategies, one per difficulty tier.

- ``random_move``: uniform over the empty cells (weak tier).
- ``balanced_move``: win, block, center, corner, then random (balanced tier).
  This ordering is intentionally weaker than perfect play.
- ``optimal_move``: exhaustive minimax (optimal tier).

Every strategy takes an optional ``numpy.random.Generator`` so games can be
replayed from a seed.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

from .game_basics import CENTER, CORNERS, EMPTY, Board, legal_moves, other_symbol
from .solver import best_move
from .tactics import find_winning_move


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def random_move(board: Board, rng: Optional[np.random.Generator] = None) -> int:
    """Uniformly chosen empty cell.

    Precondition: the board has at least one empty cell.
    """
    return int(_rng(rng).choice(legal_moves(board)))


def balanced_move(board: Board, me: str, rng: Optional[np.random.Generator] = None) -> int:
    win = find_winning_move(board, me)
    if win is not None:
        return win
    block = find_winning_move(board, other_symbol(me))
    if block is not None:
        return block
    if board[CENTER] == EMPTY:
        return CENTER
    corners = [i for i in CORNERS if board[i] == EMPTY]
    if corners:
        return int(_rng(rng).choice(corners))
    return random_move(board, rng)


def optimal_move(board: Board, me: str, rng: Optional[np.random.Generator] = None) -> int:
    mv = best_move(board, me)
    if mv is None:
        return random_move(board, rng)
    return mv
