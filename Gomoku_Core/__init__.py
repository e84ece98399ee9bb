"""Gomoku_Core package exports."""

from .Player import Player
from .Board import Board, Cell, OutOfBoundsError, create_empty, occupant_at
from .GameSession import GameSession, GameState

# Subpackages for the rule engine and helpers
from . import engine, utils

__all__ = [
    "Player",
    "Board",
    "Cell",
    "OutOfBoundsError",
    "create_empty",
    "occupant_at",
    "GameSession",
    "GameState",
    "engine",
    "utils",
]
