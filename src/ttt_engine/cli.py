from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from .arena import run_arena
from .engine import TIER_ALIASES, TIERS, select_move
from .external import GeminiMoveSource
from .game_basics import (
    SYMBOLS,
    current_player,
    get_outcome,
    is_full,
    other_symbol,
    parse_board,
    serialize_board,
)
from .solver import best_move, score_moves
from .tactics import fork_moves, immediate_winning_moves
from .tracking import log_arena, maybe_mlflow_run

TIER_CHOICES = list(TIERS) + list(TIER_ALIASES)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-engine", description="Tic-tac-toe move engine")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for random choices")

    board_help = "Board string of 9 cells: X, O and _ for empty, e.g. XO__X____"

    p_move = sub.add_parser("move", help="Select a move for a board")
    p_move.add_argument("--board", required=True, help=board_help)
    p_move.add_argument(
        "--difficulty", choices=TIER_CHOICES, default="optimal", help="Strength tier (default: optimal)"
    )
    p_move.add_argument("--as", dest="me", choices=SYMBOLS, default="X", help="Symbol to play (default: X)")
    p_move.add_argument(
        "--external",
        action="store_true",
        help="Ask the external service first on the optimal tier (needs GEMINI_API_KEY)",
    )

    p_sol = sub.add_parser("solve", help="Score every move with exhaustive search")
    p_sol.add_argument("--board", required=True, help=board_help)
    p_sol.add_argument(
        "--as", dest="me", choices=SYMBOLS, default=None, help="Symbol to play (default: side to move)"
    )

    p_tac = sub.add_parser("tactics", help="List immediate wins, blocks and forks")
    p_tac.add_argument("--board", required=True, help=board_help)
    p_tac.add_argument(
        "--as", dest="me", choices=SYMBOLS, default=None, help="Symbol to play (default: side to move)"
    )

    p_arena = sub.add_parser("arena", help="Play tiers against each other")
    p_arena.add_argument("--x", dest="x_tier", choices=TIER_CHOICES, default="optimal", help="Tier playing X")
    p_arena.add_argument("--o", dest="o_tier", choices=TIER_CHOICES, default="weak", help="Tier playing O")
    p_arena.add_argument("--games", type=int, default=20, help="Number of games (default: 20)")
    p_arena.add_argument(
        "--tracking",
        choices=["none", "mlflow"],
        default="none",
        help="Experiment tracking backend",
    )
    p_arena.add_argument(
        "--log-dir",
        type=Path,
        default=Path("runs"),
        help="Directory for tracking logs (for mlflow local backend)",
    )

    return p


def _read_board(raw: str) -> Optional[List[str]]:
    try:
        return parse_board(raw)
    except ValueError as e:
        logging.error("Invalid board: %s", e)
        return None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("ttt-engine"))
        except Exception:
            print("unknown")
        return 0

    rng = np.random.default_rng(ns.seed)

    if ns.cmd == "move":
        b = _read_board(ns.board)
        if b is None:
            return 2
        if get_outcome(b) is not None:
            logging.error("Game is already over: %s", get_outcome(b))
            return 2
        external = GeminiMoveSource.from_env(symbol=ns.me) if ns.external else None
        mv = select_move(b, ns.difficulty, me=ns.me, external=external, rng=rng)
        print(mv)
        return 0

    if ns.cmd == "solve":
        b = _read_board(ns.board)
        if b is None:
            return 2
        if is_full(b):
            logging.error("Board has no empty cell.")
            return 2
        me = ns.me or current_player(b)
        scores = score_moves(b, me)
        logging.info(
            "board=%s to_move=%s scores=%s best=%s",
            serialize_board(b),
            me,
            scores,
            best_move(b, me),
        )
        return 0

    if ns.cmd == "tactics":
        b = _read_board(ns.board)
        if b is None:
            return 2
        me = ns.me or current_player(b)
        logging.info(
            "to_move=%s wins=%s blocks=%s forks=%s",
            me,
            immediate_winning_moves(b, me),
            immediate_winning_moves(b, other_symbol(me)),
            fork_moves(b, me),
        )
        return 0

    if ns.cmd == "arena":
        if ns.games < 1:
            logging.error("--games must be positive: %s", ns.games)
            return 2
        with maybe_mlflow_run(ns.tracking == "mlflow", run_name="arena", log_dir=ns.log_dir) as tracking:
            res = run_arena(ns.x_tier, ns.o_tier, ns.games, seed=ns.seed)
            rates = res.rates()
            if tracking:
                log_arena(
                    {"x_tier": res.x_tier, "o_tier": res.o_tier, "games": res.games, "seed": ns.seed},
                    rates,
                )
        logging.info(
            "x=%s o=%s games=%d x_wins=%d o_wins=%d draws=%d",
            res.x_tier,
            res.o_tier,
            res.games,
            res.x_wins,
            res.o_wins,
            res.draws,
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
