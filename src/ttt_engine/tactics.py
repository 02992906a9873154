"""
Tactics and simple motifs: immediate wins/blocks and forks.
Teaching notes:
- A line with two of a player's symbols and one empty cell is a threat.
- Finding your own threat is a win; finding the opponent's is a block.
"""
from typing import List, Optional

from .game_basics import EMPTY, WIN_PATTERNS, Board


def find_winning_move(board: Board, player: str) -> Optional[int]:
    """First cell, in line order, that completes a line for ``player``."""
    for pattern in WIN_PATTERNS:
        cells = [board[i] for i in pattern]
        if cells.count(player) == 2 and cells.count(EMPTY) == 1:
            return pattern[cells.index(EMPTY)]
    return None


def immediate_winning_moves(board: Board, player: str) -> List[int]:
    wins = set()
    for pattern in WIN_PATTERNS:
        cells = [board[i] for i in pattern]
        if cells.count(player) == 2 and cells.count(EMPTY) == 1:
            wins.add(pattern[cells.index(EMPTY)])
    return sorted(wins)


def fork_moves(board: Board, player: str) -> List[int]:
    forks: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = list(board)
        b[i] = player
        if len(immediate_winning_moves(b, player)) >= 2:
            forks.append(i)
    return forks
