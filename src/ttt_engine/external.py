"""
Optional external move source backed by a text-generation service.

The service is asked for a single cell index and its answer is only
trusted once it parses as an in-range integer pointing at an empty cell.
Every failure path returns None so the caller can fall back to the local
search; nothing here raises for a bad reply or a network problem.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional

import requests

from . import config
from .game_basics import EMPTY, Board

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
PLACEHOLDER = "_"

# A move source maps a board to a cell index, or None when it has no answer.
MoveSource = Callable[[Board], Optional[int]]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def build_prompt(board: Board, symbol: str) -> str:
    cells = ", ".join(PLACEHOLDER if cell == EMPTY else cell for cell in board)
    return (
        f"You are playing Tic Tac Toe as {symbol}. The current board is [{cells}]. "
        "Return the best next move index (0-8) as a single number. "
        "Only respond with the number, no other text."
    )


def parse_reply(text: Any, board: Board) -> Optional[int]:
    """Leading integer of ``text`` if it names an empty cell, else None."""
    if not isinstance(text, str):
        return None
    m = _LEADING_INT.match(text)
    if m is None:
        return None
    move = int(m.group(1))
    if move < 0 or move > 8 or board[move] != EMPTY:
        return None
    return move


def _reply_text(data: Any) -> Optional[str]:
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"].strip()
    except (KeyError, IndexError, TypeError, AttributeError):
        return None


class GeminiMoveSource:
    """Asks the Gemini ``generateContent`` endpoint for a move."""

    def __init__(
        self,
        api_key: str,
        symbol: str = "X",
        model: str = config.DEFAULT_GEMINI_MODEL,
        timeout: float = config.DEFAULT_GEMINI_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.symbol = symbol
        self.model = model
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_env(cls, symbol: str = "X") -> Optional["GeminiMoveSource"]:
        key = config.gemini_api_key()
        if key is None:
            logging.debug("GEMINI_API_KEY not set; external move source disabled")
            return None
        return cls(key, symbol=symbol, model=config.gemini_model(), timeout=config.gemini_timeout())

    def payload(self, board: Board) -> dict:
        return {
            "contents": [{"parts": [{"text": build_prompt(board, self.symbol)}]}],
            "generationConfig": {"temperature": 0.7, "maxOutputTokens": 10},
        }

    def __call__(self, board: Board) -> Optional[int]:
        try:
            response = self.session.post(
                GEMINI_URL.format(model=self.model),
                params={"key": self.api_key},
                json=self.payload(board),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logging.debug("External move request failed: %s", e)
            return None

        if not 200 <= response.status_code < 300:
            logging.debug("External move service returned status %s", response.status_code)
            return None

        try:
            data = response.json()
        except ValueError:
            logging.debug("External move service returned invalid JSON")
            return None

        text = _reply_text(data)
        move = parse_reply(text, board)
        if move is None:
            logging.debug("Rejected external reply %r", text)
        return move
