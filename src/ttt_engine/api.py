"""
Framework-free handler for move requests.

``handle_move_request`` takes the HTTP method and the decoded JSON body and
returns ``(status, payload)``; any web layer can wrap it. Input is validated
here so the engine only ever sees a 9-cell board of strings.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np

from . import config
from .engine import select_move
from .external import GeminiMoveSource, MoveSource
from .game_basics import X, is_full, is_valid_board
from .strategies import random_move

_USE_ENV = object()


def handle_move_request(
    method: str,
    body: Any,
    external: Any = _USE_ENV,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[int, Dict[str, Any]]:
    """Validate a posted board and answer with ``{"move": <int>}``.

    ``external`` defaults to a Gemini source configured from the
    environment (None when no key is set); pass None to disable it or any
    ``board -> Optional[int]`` callable to substitute one.
    """
    if not isinstance(method, str) or method.upper() != "POST":
        return 405, {"error": "Method not allowed"}

    board = body.get("board") if isinstance(body, dict) else None
    if not is_valid_board(board):
        return 400, {"error": "Invalid board format"}
    if is_full(board):
        return 400, {"error": "Board has no empty cell"}

    difficulty = body.get("difficulty")
    if not isinstance(difficulty, str):
        difficulty = config.default_difficulty()

    try:
        source: Optional[MoveSource] = (
            GeminiMoveSource.from_env(symbol=X) if external is _USE_ENV else external
        )
        move = select_move(board, difficulty, me=X, external=source, rng=rng)
    except Exception:
        logging.exception("AI move error")
        move = random_move(board, rng)
    return 200, {"move": move}
