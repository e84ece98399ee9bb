"""Turn alternation, win/draw latching, and undo history for one Gomoku game."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from Gomoku_Core.Board import Board, create_empty
from Gomoku_Core.Player import Player
from Gomoku_Core.engine import gomoku_rules, referee
from Gomoku_Core.utils.logger import log_event


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a session. `history` holds the boards that preceded each
    applied placement, oldest first; its tail is the undo target.
    `foul_alert` is reserved for forbidden-move messages and is never set
    by the freestyle rules.
    """

    board: Board
    current_player: Player = Player.PLAYER1
    winner: Optional[Player] = None
    is_draw: bool = False
    history: Tuple[Board, ...] = ()
    show_stone_colors: bool = False
    foul_alert: Optional[str] = None

    def __post_init__(self):
        if self.winner is not None and self.is_draw:
            raise ValueError("a game cannot have a winner and be drawn")

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def can_undo(self) -> bool:
        return len(self.history) > 0

    @property
    def status_text(self) -> str:
        if self.winner is not None:
            return f"Winner: {self.winner.display_name}"
        if self.is_draw:
            return "Draw"
        return f"Turn: {self.current_player.display_name}"


class GameSession:
    """
    Single-caller state machine over GameState. Every operation returns the
    resulting state; ignored requests return the unchanged state object.
    """

    def __init__(self, board_size=13, show_stone_colors=False, logger=log_event):
        self.board_size = board_size
        self.logger = logger
        self.state = GameState(board=create_empty(board_size), show_stone_colors=show_stone_colors)

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def winner(self) -> Optional[Player]:
        return self.state.winner

    @property
    def is_draw(self) -> bool:
        return self.state.is_draw

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    @property
    def history_length(self) -> int:
        return len(self.state.history)

    @property
    def can_undo(self) -> bool:
        return self.state.can_undo

    @property
    def show_stone_colors(self) -> bool:
        return self.state.show_stone_colors

    def place(self, row: int, col: int) -> GameState:
        """Attempt a placement for the player to move."""
        state = self.state
        if state.is_over:
            self.logger("Game already decided; placement ignored")
            return state

        referee.check_move(state.board, row, col)
        player = state.current_player
        new_board = gomoku_rules.place(state.board, row, col, player)
        if new_board == state.board:
            self.logger(f"Cell ({row}, {col}) is occupied; placement ignored")
            return state

        is_win = gomoku_rules.check_winner(new_board, row, col, player)
        is_draw = not is_win and gomoku_rules.check_draw(new_board)
        next_player = player if is_win or is_draw else player.opposite()

        self.state = replace(
            state,
            board=new_board,
            current_player=next_player,
            winner=player if is_win else None,
            is_draw=is_draw,
            history=state.history + (state.board,),
        )

        self.logger(f"Move {len(self.state.history)}: {player.name} ({row}, {col})")
        if is_win:
            self.logger(f"Winner: {player.display_name}")
        elif is_draw:
            self.logger("Result: Draw (board full)")
        return self.state

    def undo(self) -> GameState:
        """
        Restore the board before the last placement and reopen the game.
        The turn flips from its pre-undo value rather than being restored.
        """
        state = self.state
        if not state.history:
            self.logger("Nothing to undo")
            return state

        self.state = replace(
            state,
            board=state.history[-1],
            current_player=state.current_player.opposite(),
            winner=None,
            is_draw=False,
            history=state.history[:-1],
        )
        self.logger(f"Undo: {len(self.state.history)} move(s) remain")
        return self.state

    def reset(self) -> GameState:
        """Start over on an empty board, keeping the size and display preference."""
        self.logger("Reset")
        self.state = GameState(
            board=create_empty(self.board_size),
            show_stone_colors=self.state.show_stone_colors,
        )
        return self.state

    def toggle_show_stone_colors(self) -> GameState:
        self.state = replace(self.state, show_stone_colors=not self.state.show_stone_colors)
        self.logger(f"Show stone colors: {'ON' if self.state.show_stone_colors else 'OFF'}")
        return self.state
