"""
Self-play between difficulty tiers.

A game is recorded as its move list, final board and outcome. ``run_arena``
plays a batch of games and tallies wins, losses and draws from X's side.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .engine import normalize_tier, select_move
from .game_basics import DRAW, EMPTY, O, X, get_outcome, other_symbol


@dataclass
class GameRecord:
    x_tier: str
    o_tier: str
    moves: List[int] = field(default_factory=list)
    final_board: List[str] = field(default_factory=lambda: [EMPTY] * 9)
    outcome: Optional[str] = None


@dataclass
class ArenaResult:
    x_tier: str
    o_tier: str
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def rates(self) -> Dict[str, float]:
        counts = np.array([self.x_wins, self.o_wins, self.draws], dtype=float)
        total = counts.sum()
        shares = counts / total if total > 0 else np.zeros(3)
        return {
            'x_win_rate': float(shares[0]),
            'o_win_rate': float(shares[1]),
            'draw_rate': float(shares[2]),
        }


def play_game(
    x_tier: str,
    o_tier: str,
    rng: Optional[np.random.Generator] = None,
) -> GameRecord:
    rng = rng if rng is not None else np.random.default_rng()
    tiers = {X: normalize_tier(x_tier), O: normalize_tier(o_tier)}
    rec = GameRecord(x_tier=tiers[X], o_tier=tiers[O])
    board = rec.final_board
    player = X
    while get_outcome(board) is None:
        mv = select_move(board, tiers[player], me=player, rng=rng)
        board[mv] = player
        rec.moves.append(mv)
        player = other_symbol(player)
    rec.outcome = get_outcome(board)
    return rec


def run_arena(x_tier: str, o_tier: str, games: int, seed: Optional[int] = None) -> ArenaResult:
    rng = np.random.default_rng(seed)
    result = ArenaResult(x_tier=normalize_tier(x_tier), o_tier=normalize_tier(o_tier))
    for _ in range(games):
        rec = play_game(x_tier, o_tier, rng)
        if rec.outcome == X:
            result.x_wins += 1
        elif rec.outcome == O:
            result.o_wins += 1
        elif rec.outcome == DRAW:
            result.draws += 1
        logging.debug("game moves=%s outcome=%s", rec.moves, rec.outcome)
    return result
