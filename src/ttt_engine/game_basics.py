"""
Game basics: board representation, rules, winner/draw checks, parsing.
Teaching notes:
- State is a list of 9 cells: "" = empty, "X" or "O". Row-major, indices 0..8.
- A "ply" is a half-move (one player's turn).
- The outcome of a board is derived on demand and never stored.
"""
from typing import List, Optional, Sequence

EMPTY = ""
X = "X"
O = "O"
SYMBOLS = (X, O)
DRAW = "draw"

WIN_PATTERNS = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
CENTER = 4
CORNERS = (0, 2, 6, 8)

# Characters accepted for an empty cell in board strings.
EMPTY_GLYPHS = "_.-"

Board = Sequence[str]


def get_winner(board: Board) -> str:
    for a, b, c in WIN_PATTERNS:
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return v
    return EMPTY


def is_full(board: Board) -> bool:
    return EMPTY not in board


def is_draw(board: Board) -> bool:
    return is_full(board) and get_winner(board) == EMPTY


def get_outcome(board: Board) -> Optional[str]:
    """Winning symbol, ``DRAW`` for a full board without a line, else None."""
    w = get_winner(board)
    if w != EMPTY:
        return w
    if is_full(board):
        return DRAW
    return None


def legal_moves(board: Board) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def other_symbol(symbol: str) -> str:
    return O if symbol == X else X


def current_player(board: Board) -> str:
    return X if board.count(X) == board.count(O) else O


def serialize_board(board: Board) -> str:
    return ''.join(cell if cell != EMPTY else '_' for cell in board)


def parse_board(board_str: str) -> List[str]:
    """Parse a 9-character board string such as ``"XO_X_____"``.

    Empty cells may be written as ``_``, ``.`` or ``-``; symbols are
    case-insensitive. Raises ValueError for anything else.
    """
    raw = board_str.strip()
    if len(raw) != 9:
        raise ValueError(f"Board must have 9 cells, got {len(raw)}: {board_str!r}")
    cells: List[str] = []
    for ch in raw:
        if ch in EMPTY_GLYPHS:
            cells.append(EMPTY)
        elif ch.upper() in SYMBOLS:
            cells.append(ch.upper())
        else:
            raise ValueError(f"Unknown cell {ch!r} in board {board_str!r}")
    return cells


def is_valid_board(board: object) -> bool:
    """True for a list of exactly 9 string cells."""
    return (
        isinstance(board, list)
        and len(board) == 9
        and all(isinstance(cell, str) for cell in board)
    )
