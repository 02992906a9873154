"""Environment-driven settings for the engine and its collaborators.

Every value is read at call time so tests and long-running hosts can
change the environment without reloading the module.
"""

from __future__ import annotations

import logging
import os

DEFAULT_GEMINI_MODEL = "gemini-pro"
DEFAULT_GEMINI_TIMEOUT = 10.0
DEFAULT_DIFFICULTY = "optimal"


def gemini_api_key() -> str | None:
    """Credential for the external text-generation service, or None.

    A missing or blank key is a normal condition: the optimal tier then
    runs the local search only.
    """
    key = os.getenv("GEMINI_API_KEY")
    if key is None or not key.strip():
        return None
    return key.strip()


def gemini_model() -> str:
    return os.getenv("TTT_GEMINI_MODEL") or DEFAULT_GEMINI_MODEL


def gemini_timeout() -> float:
    raw = os.getenv("TTT_GEMINI_TIMEOUT")
    if not raw:
        return DEFAULT_GEMINI_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logging.warning("Ignoring TTT_GEMINI_TIMEOUT=%r (not a number)", raw)
        return DEFAULT_GEMINI_TIMEOUT
    if value <= 0:
        logging.warning("Ignoring TTT_GEMINI_TIMEOUT=%r (must be positive)", raw)
        return DEFAULT_GEMINI_TIMEOUT
    return value


def default_difficulty() -> str:
    return os.getenv("TTT_DEFAULT_DIFFICULTY") or DEFAULT_DIFFICULTY
