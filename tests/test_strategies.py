from typing import List

import numpy as np
from hypothesis import given, settings, strategies as st

from ttt_engine.game_basics import CORNERS, parse_board
from ttt_engine.strategies import balanced_move, optimal_move, random_move

cells = st.sampled_from(["", "X", "O"])
boards_with_space = st.lists(cells, min_size=9, max_size=9).filter(lambda b: "" in b)


@given(boards_with_space, st.integers(min_value=0, max_value=2**32 - 1))
def test_random_and_balanced_pick_empty_cells(board: List[str], seed: int):
    rng = np.random.default_rng(seed)
    assert board[random_move(board, rng)] == ""
    assert board[balanced_move(board, "X", rng)] == ""
    assert board[balanced_move(board, "O", rng)] == ""


@settings(max_examples=30, deadline=None)
@given(st.lists(cells, min_size=9, max_size=9).filter(lambda b: b.count("") >= 1 and b.count("") <= 6))
def test_optimal_picks_empty_cell_and_leaves_board_alone(board: List[str]):
    before = list(board)
    mv = optimal_move(board, "X")
    assert board[mv] == ""
    assert board == before


def test_random_is_uniform_over_empty_cells():
    rng = np.random.default_rng(0)
    b = parse_board("X_O_X_O_X")
    seen = {random_move(b, rng) for _ in range(200)}
    assert seen == {1, 3, 5, 7}


def test_balanced_completes_own_line():
    b = ["X", "X", "", "", "", "", "", "", ""]
    assert balanced_move(b, "X") == 2


def test_balanced_blocks_opponent():
    b = ["", "X", "X", "", "", "", "", "", ""]
    assert balanced_move(b, "O") == 0


def test_balanced_prefers_win_over_block():
    b = parse_board("OO_XX____")
    assert balanced_move(b, "X") == 5
    assert balanced_move(b, "O") == 2


def test_balanced_takes_center_then_corners():
    assert balanced_move([""] * 9, "X") == 4
    rng = np.random.default_rng(1)
    b = parse_board("____X____")
    picks = {balanced_move(b, "O", rng) for _ in range(100)}
    assert picks == set(CORNERS)


def test_balanced_falls_back_to_edges():
    # center and corners taken, no open pair for either side
    b = parse_board("XOX_O_OXO")
    assert balanced_move(b, "X") in (3, 5)


def test_balanced_is_not_optimal():
    # X took a corner, O answers by the heuristic with the center, X takes
    # the opposite corner; the heuristic then plays a corner, which loses
    b = parse_board("X___O___X")
    rng = np.random.default_rng(0)
    assert balanced_move(b, "O", rng) in (2, 6)
    assert optimal_move(b, "O") in (1, 3, 5, 7)

