"""Tests for referee coordinate enforcement."""

import pytest

from Gomoku_Core.Board import OutOfBoundsError, create_empty
from Gomoku_Core.Player import Player
from Gomoku_Core.engine import gomoku_rules, referee


def test_valid_move_passes():
    b = create_empty(13)
    assert referee.check_move(b, 6, 6) is True


def test_occupied_cell_is_not_an_error():
    b = gomoku_rules.place(create_empty(13), 6, 6, Player.PLAYER1)
    assert referee.check_move(b, 6, 6) is True


@pytest.mark.parametrize("row, col", [(13, 0), (0, 13), (-1, 5), (5, -1)])
def test_out_of_range_rejected(row, col):
    with pytest.raises(OutOfBoundsError):
        referee.check_move(create_empty(13), row, col)


@pytest.mark.parametrize("row, col", [(1.5, 2), (2, "3"), (True, False), (0, True)])
def test_non_integer_rejected(row, col):
    with pytest.raises(OutOfBoundsError):
        referee.check_move(create_empty(13), row, col)
