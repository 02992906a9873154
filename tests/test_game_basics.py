import pytest

from ttt_engine.game_basics import (
    DRAW,
    WIN_PATTERNS,
    current_player,
    get_outcome,
    get_winner,
    is_draw,
    is_valid_board,
    legal_moves,
    parse_board,
    serialize_board,
)


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
@pytest.mark.parametrize("symbol", ["X", "O"])
def test_every_line_is_detected(pattern, symbol):
    other = "O" if symbol == "X" else "X"
    # fill the rest with an alternating mix that never completes a line for `other`
    board = [other if i % 2 else "" for i in range(9)]
    for i in pattern:
        board[i] = symbol
    assert get_winner(board) == symbol
    assert get_outcome(board) == symbol


def test_full_board_without_line_is_draw():
    board = parse_board("XXOOOXXOX")
    assert get_winner(board) == ""
    assert is_draw(board)
    assert get_outcome(board) == DRAW


def test_unfinished_boards_are_undecided():
    assert get_outcome([""] * 9) is None
    assert get_outcome(parse_board("XO_X_O___")) is None


def test_line_order_is_deterministic():
    # both the top row and the first column are X; the row comes first
    board = parse_board("XXXXOOXOO")
    assert get_outcome(board) == "X"


def test_legal_moves_and_current_player():
    b = parse_board("X___O____")
    assert legal_moves(b) == [1, 2, 3, 5, 6, 7, 8]
    assert current_player(b) == "X"
    assert current_player(parse_board("X________")) == "O"


def test_parse_board_accepts_glyphs_and_case():
    assert parse_board("x.o-_____") == ["X", "", "O", "", "", "", "", "", ""]
    assert serialize_board(parse_board("x.o-_____")) == "X_O______"


@pytest.mark.parametrize("bad", ["", "XO", "XXXXXXXXXX", "XO_Z_____"])
def test_parse_board_rejects_malformed(bad):
    with pytest.raises(ValueError):
        parse_board(bad)


def test_is_valid_board_shape():
    assert is_valid_board([""] * 9)
    assert not is_valid_board([""] * 8)
    assert not is_valid_board(("",) * 9)
    assert not is_valid_board([""] * 8 + [0])
    assert not is_valid_board(None)
