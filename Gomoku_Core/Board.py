"""Immutable board snapshot: an N x N grid of cells with optional owners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from Gomoku_Core.Player import Player


class OutOfBoundsError(ValueError):
    """Raised when a (row, col) pair lies outside [0, N)."""


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    owner: Optional[Player] = None  # None = empty


@dataclass(frozen=True)
class Board:
    """A value snapshot. Placement builds a new Board; nothing mutates this one."""

    size: int
    cells: Tuple[Tuple[Cell, ...], ...]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def require_in_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"({row}, {col}) is outside a {self.size}x{self.size} board")

    def cell(self, row: int, col: int) -> Cell:
        self.require_in_bounds(row, col)
        return self.cells[row][col]

    def occupant_at(self, row: int, col: int) -> Optional[Player]:
        return self.cell(row, col).owner

    def is_empty(self, row: int, col: int) -> bool:
        return self.occupant_at(row, col) is None

    @property
    def stone_count(self) -> int:
        return sum(1 for line in self.cells for c in line if c.owner is not None)


def create_empty(size: int) -> Board:
    """Return a size x size board with every cell unoccupied."""
    if size < 1:
        raise ValueError(f"board size must be positive, got {size}")
    cells = tuple(tuple(Cell(row, col) for col in range(size)) for row in range(size))
    return Board(size=size, cells=cells)


def occupant_at(board: Board, row: int, col: int) -> Optional[Player]:
    return board.occupant_at(row, col)
