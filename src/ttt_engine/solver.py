"""
Exhaustive game-tree search (depth-aware minimax) from a fixed player's perspective.
Scoring policy:
- A win for ``me`` scores 10 - depth, so faster wins score higher.
- A loss scores depth - 10, so a forced loss is delayed as long as possible.
- A draw scores 0.
Depth counts plies from the search root, not from the start of the game.
"""
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, List, MutableSequence, Optional

from .game_basics import DRAW, EMPTY, SYMBOLS, Board, get_outcome, other_symbol

WIN_SCORE = 10
# Covers every reachable position for both players.
SCORE_CACHE_SIZE = 16384
CELL_VALUES = (EMPTY,) + SYMBOLS


@contextmanager
def placed(board: MutableSequence[str], idx: int, symbol: str) -> Iterator[None]:
    """Place ``symbol`` at ``idx`` for the duration of the block, then clear it."""
    board[idx] = symbol
    try:
        yield
    finally:
        board[idx] = EMPTY


def terminal_score(outcome: str, me: str, depth: int) -> int:
    if outcome == DRAW:
        return 0
    if outcome == me:
        return WIN_SCORE - depth
    return depth - WIN_SCORE


def minimax(board: MutableSequence[str], depth: int, me: str, to_move: str) -> int:
    outcome = get_outcome(board)
    if outcome is not None:
        return terminal_score(outcome, me, depth)
    maximizing = to_move == me
    best: Optional[int] = None
    for i in range(9):
        if board[i] != EMPTY:
            continue
        with placed(board, i, to_move):
            score = minimax(board, depth + 1, me, other_symbol(to_move))
        if best is None or (score > best if maximizing else score < best):
            best = score
    return best  # type: ignore[return-value]


def _score_moves(work: MutableSequence[str], me: str) -> tuple:
    scores: List[Optional[int]] = [None] * 9
    for i in range(9):
        if work[i] != EMPTY:
            continue
        with placed(work, i, me):
            scores[i] = minimax(work, 0, me, other_symbol(me))
    return tuple(scores)


@lru_cache(maxsize=SCORE_CACHE_SIZE)
def _score_moves_t(board_t: tuple, me: str) -> tuple:
    return _score_moves(list(board_t), me)


def score_moves(board: Board, me: str) -> List[Optional[int]]:
    """Minimax value of every move for ``me``; None for occupied cells.

    Works on a private copy, so the caller's board is never touched.
    Results are memoized per (board, player) for well-formed boards only;
    boards with unknown cell values are searched without touching the cache.
    """
    board_t = tuple(board)
    if me in SYMBOLS and all(cell in CELL_VALUES for cell in board_t):
        return list(_score_moves_t(board_t, me))
    return list(_score_moves(list(board_t), me))


def best_move(board: Board, me: str) -> Optional[int]:
    """Lowest index with the strictly greatest score, or None on a full board."""
    best_idx: Optional[int] = None
    best_score: Optional[int] = None
    for i, score in enumerate(score_moves(board, me)):
        if score is None:
            continue
        if best_score is None or score > best_score:
            best_idx, best_score = i, score
    return best_idx
