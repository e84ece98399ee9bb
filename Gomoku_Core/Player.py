"""Occupant identity for the two sides of a Gomoku game."""

from enum import Enum


class Player(Enum):
    PLAYER1 = 1  # moves first, black stones
    PLAYER2 = 2

    def opposite(self):
        return Player.PLAYER2 if self is Player.PLAYER1 else Player.PLAYER1

    @property
    def display_name(self):
        """Label for status lines and dialogs, e.g. 'Player 1 (Black)'."""
        if self is Player.PLAYER1:
            return "Player 1 (Black)"
        return "Player 2 (White)"
