"""Move validation against the board's coordinate range."""

from Gomoku_Core.Board import OutOfBoundsError


def check_move(board, row, col):
    """
    Validate that (row, col) addresses a cell on board.
    Raises OutOfBoundsError otherwise. An occupied cell is not an error here;
    placement on it is a silent no-op handled by the rules.
    """
    if any(not isinstance(v, int) or isinstance(v, bool) for v in (row, col)):
        raise OutOfBoundsError(f"coordinates must be integers, got ({row!r}, {col!r})")
    board.require_in_bounds(row, col)
    return True
