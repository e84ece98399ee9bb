"""Freestyle Gomoku rules: stone placement, five-or-more win, full-board draw."""

from Gomoku_Core.Board import Board, Cell
from Gomoku_Core.Player import Player

WIN_LENGTH = 5

# vertical, horizontal, diagonal down-right, diagonal down-left
DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]


def place(board: Board, row: int, col: int, player: Player) -> Board:
    """
    Return a new board with `player` at (row, col).
    An occupied target returns the input board itself; callers detect the no-op by equality.
    """
    target = board.cell(row, col)
    if target.owner is not None:
        return board

    # Untouched rows are shared with the old snapshot; they are tuples and never change.
    new_row = list(board.cells[row])
    new_row[col] = Cell(row, col, player)
    cells = board.cells[:row] + (tuple(new_row),) + board.cells[row + 1:]
    return Board(size=board.size, cells=cells)


def _count_dir(board: Board, row: int, col: int, dr: int, dc: int, player: Player) -> int:
    """Count contiguous stones of player from (row, col) (exclusive) in (dr, dc)."""
    count = 0
    r, c = row + dr, col + dc
    while board.in_bounds(r, c) and board.cells[r][c].owner == player:
        count += 1
        r += dr
        c += dc
    return count


def max_line_length(board: Board, row: int, col: int, player: Player) -> int:
    """Longest run of player's stones through (row, col); 0 if the cell is not player's."""
    if board.occupant_at(row, col) != player:
        return 0
    best = 0
    for dr, dc in DIRECTIONS:
        forward = _count_dir(board, row, col, dr, dc, player)
        backward = _count_dir(board, row, col, -dr, -dc, player)
        best = max(best, 1 + forward + backward)
    return best


def check_winner(board: Board, last_row: int, last_col: int, player: Player) -> bool:
    """True if player has five or more in a row through the last placed stone. Overlines win."""
    return max_line_length(board, last_row, last_col, player) >= WIN_LENGTH


def check_draw(board: Board) -> bool:
    return all(cell.owner is not None for line in board.cells for cell in line)
