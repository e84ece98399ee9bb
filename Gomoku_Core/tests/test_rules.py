"""Rule engine: placement, five-or-more win detection, full-board draw."""

import pytest

from Gomoku_Core.Board import OutOfBoundsError, create_empty
from Gomoku_Core.Player import Player
from Gomoku_Core.engine import gomoku_rules

P1 = Player.PLAYER1
P2 = Player.PLAYER2


def board_with(size, stones):
    """Build a board from {(row, col): player}."""
    b = create_empty(size)
    for (r, c), player in stones.items():
        b = gomoku_rules.place(b, r, c, player)
    return b


def test_place_changes_exactly_one_cell():
    before = board_with(9, {(4, 4): P2})
    after = gomoku_rules.place(before, 1, 7, P1)
    diffs = [
        (r, c)
        for r in range(9)
        for c in range(9)
        if before.occupant_at(r, c) != after.occupant_at(r, c)
    ]
    assert diffs == [(1, 7)]
    assert after.occupant_at(1, 7) is P1
    assert after.occupant_at(4, 4) is P2


def test_place_leaves_input_board_untouched():
    before = create_empty(9)
    gomoku_rules.place(before, 0, 0, P1)
    assert before.occupant_at(0, 0) is None
    assert before == create_empty(9)


def test_place_on_occupied_cell_returns_input():
    before = board_with(9, {(3, 3): P1})
    after = gomoku_rules.place(before, 3, 3, P2)
    assert after == before
    assert after.occupant_at(3, 3) is P1


def test_place_does_not_enforce_turns():
    b = gomoku_rules.place(create_empty(5), 0, 0, P1)
    b = gomoku_rules.place(b, 0, 1, P1)
    assert b.stone_count == 2


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 9), (9, 9)])
def test_place_out_of_range(row, col):
    with pytest.raises(OutOfBoundsError):
        gomoku_rules.place(create_empty(9), row, col, P1)


def test_four_in_a_row_is_not_a_win():
    b = board_with(9, {(0, c): P1 for c in range(4)})
    for c in range(4):
        assert not gomoku_rules.check_winner(b, 0, c, P1)


def test_fifth_stone_completes_horizontal_five():
    b = board_with(9, {(0, c): P1 for c in range(4)})
    b = gomoku_rules.place(b, 0, 4, P1)
    assert gomoku_rules.check_winner(b, 0, 4, P1)


@pytest.mark.parametrize(
    "line",
    [
        [(r, 2) for r in range(2, 7)],  # vertical
        [(r, r) for r in range(5)],  # diagonal down-right
        [(r, 8 - r) for r in range(4, 9)],  # diagonal down-left, touching the corner
        [(8, c) for c in range(4, 9)],  # bottom edge
    ],
)
def test_five_in_each_orientation(line):
    b = board_with(9, {pos: P2 for pos in line})
    for r, c in line:
        assert gomoku_rules.check_winner(b, r, c, P2)
    assert not gomoku_rules.check_winner(b, *line[0], P1)


def test_win_when_anchor_in_middle_of_run():
    b = board_with(13, {(6, c): P1 for c in (3, 4, 6, 7)})
    b = gomoku_rules.place(b, 6, 5, P1)
    assert gomoku_rules.check_winner(b, 6, 5, P1)


def test_overline_counts_as_win():
    b = board_with(13, {(2, c): P1 for c in range(6)})
    assert gomoku_rules.max_line_length(b, 2, 5, P1) == 6
    assert gomoku_rules.check_winner(b, 2, 5, P1)


def test_opponent_stone_breaks_run():
    stones = {(0, c): P1 for c in (0, 1, 3, 4, 5)}
    stones[(0, 2)] = P2
    b = board_with(9, stones)
    assert not gomoku_rules.check_winner(b, 0, 3, P1)


def test_line_does_not_wrap_around_edges():
    stones = {(0, 6): P1, (0, 7): P1, (0, 8): P1, (1, 0): P1, (1, 1): P1}
    b = board_with(9, stones)
    assert not gomoku_rules.check_winner(b, 0, 8, P1)
    assert not gomoku_rules.check_winner(b, 1, 0, P1)


def test_check_winner_false_when_anchor_not_owned():
    b = board_with(9, {(0, c): P1 for c in range(5)})
    # anchor empty
    assert not gomoku_rules.check_winner(b, 1, 0, P1)
    # anchor held by the other player
    b = gomoku_rules.place(b, 1, 1, P2)
    assert not gomoku_rules.check_winner(b, 1, 1, P1)
    # the five belongs to P1, not P2
    assert not gomoku_rules.check_winner(b, 0, 2, P2)


def test_check_winner_out_of_range():
    with pytest.raises(OutOfBoundsError):
        gomoku_rules.check_winner(create_empty(9), 9, 0, P1)


def test_check_draw_only_when_full():
    size = 5
    stones = {(r, c): (P1 if (r + c) % 2 else P2) for r in range(size) for c in range(size)}
    last = stones.pop((4, 4))
    b = board_with(size, stones)
    assert not gomoku_rules.check_draw(b)
    b = gomoku_rules.place(b, 4, 4, last)
    assert gomoku_rules.check_draw(b)


def test_check_draw_ignores_winner():
    b = board_with(5, {(r, c): P1 for r in range(5) for c in range(5)})
    assert gomoku_rules.check_draw(b)
    assert gomoku_rules.check_winner(b, 0, 0, P1)


def test_empty_board_is_not_a_draw():
    assert not gomoku_rules.check_draw(create_empty(9))
