"""
Top-level move selection: routes a board to the strategy for a tier.

Tiers:
- weak: random empty cell
- balanced: win/block/center/corner heuristic
- optimal: external move source when configured, else exhaustive search

Any unexpected error inside a strategy is logged and answered with a
random move, so a board with at least one empty cell always gets a move.
Malformed boards must be rejected by the caller before reaching here.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .external import MoveSource
from .game_basics import EMPTY, X, Board
from .strategies import balanced_move, optimal_move, random_move

WEAK = "weak"
BALANCED = "balanced"
OPTIMAL = "optimal"
TIERS = (WEAK, BALANCED, OPTIMAL)

TIER_ALIASES = {
    "easy": WEAK,
    "medium": BALANCED,
    "hard": OPTIMAL,
}


def normalize_tier(tier: Optional[str]) -> str:
    """Map a requested difficulty onto a tier; unknown values mean optimal."""
    if not isinstance(tier, str):
        return OPTIMAL
    t = tier.strip().lower()
    t = TIER_ALIASES.get(t, t)
    return t if t in TIERS else OPTIMAL


def _external_move(board: Board, external: MoveSource) -> Optional[int]:
    try:
        move = external(board)
    except Exception:
        logging.warning("External move source failed; using search", exc_info=True)
        return None
    if move is None:
        return None
    if isinstance(move, bool) or not isinstance(move, (int, np.integer)):
        logging.debug("Ignoring non-integer external move %r", move)
        return None
    if not 0 <= move <= 8 or board[move] != EMPTY:
        logging.debug("Ignoring illegal external move %r", move)
        return None
    return int(move)


def _dispatch(
    board: Board,
    tier: str,
    me: str,
    external: Optional[MoveSource],
    rng: Optional[np.random.Generator],
) -> int:
    if tier == WEAK:
        return random_move(board, rng)
    if tier == BALANCED:
        return balanced_move(board, me, rng)
    if external is not None:
        move = _external_move(board, external)
        if move is not None:
            logging.debug("Using external move %d", move)
            return move
    return optimal_move(board, me, rng)


def select_move(
    board: Board,
    tier: Optional[str] = OPTIMAL,
    me: str = X,
    external: Optional[MoveSource] = None,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Choose a move for ``me`` on ``board`` at the requested strength."""
    t = normalize_tier(tier)
    try:
        return _dispatch(board, t, me, external, rng)
    except Exception:
        logging.exception("Move selection failed for tier=%s; playing a random move", t)
        return random_move(board, rng)
