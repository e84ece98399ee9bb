"""Terminal entry point: load settings, build a GameSession, read commands from stdin."""

import sys
from pathlib import Path

import yaml

from Gomoku_Core.Board import OutOfBoundsError
from Gomoku_Core.GameSession import GameSession
from Gomoku_Core.Player import Player
from Gomoku_Core.utils.cli import parse_args
from Gomoku_Core.utils.logger import log_event, silent


PROJECT_DIR = Path(__file__).resolve().parent

SUPPORTED_BOARD_SIZES = (9, 13)
MIN_BOARD_SIZE = 5
DEFAULT_BOARD_SIZE = 13

HELP_TEXT = "Commands: '<row> <col>' place, 'u' undo, 'r' reset, 't' toggle colors, 'q' quit"


def resolve_project_path(path: str | Path) -> Path:
    """Prefer path as given; fall back to the copy shipped inside the package."""
    given = Path(path)
    if given.is_absolute() or given.exists():
        return given
    bundled = PROJECT_DIR / given
    return bundled if bundled.exists() else given


def load_settings(path):
    """Read the settings mapping. An empty file is {}; any other non-mapping document is rejected."""
    settings_path = resolve_project_path(path)
    with open(settings_path, "r", encoding="utf-8") as f:
        settings = yaml.safe_load(f)
    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise ValueError(f"{settings_path}: settings must be a YAML mapping, got {type(settings).__name__}")
    return settings


def resolve_options(args, settings):
    """Merge CLI options over settings over defaults. Returns (board_size, show_stone_colors)."""
    if args.board_size is not None:
        board_size = args.board_size
    else:
        board_size = settings.get("board_size", DEFAULT_BOARD_SIZE)
    if args.show_stone_colors is not None:
        show_stone_colors = args.show_stone_colors
    else:
        show_stone_colors = bool(settings.get("show_stone_colors", False))
    if not isinstance(board_size, int) or board_size < MIN_BOARD_SIZE:
        raise ValueError(f"board_size must be an integer >= {MIN_BOARD_SIZE}, got {board_size!r}")
    return board_size, show_stone_colors


def format_board(state):
    """Plain-text grid. Without stone colors every stone shows as 'o'."""
    board = state.board
    marks = {Player.PLAYER1: "X", Player.PLAYER2: "O"}
    width = len(str(board.size - 1))
    lines = [" " * (width + 1) + " ".join(str(c % 10) for c in range(board.size))]
    for r, row in enumerate(board.cells):
        cells = []
        for cell in row:
            if cell.owner is None:
                cells.append(".")
            elif state.show_stone_colors:
                cells.append(marks[cell.owner])
            else:
                cells.append("o")
        lines.append(f"{r:>{width}} " + " ".join(cells))
    return "\n".join(lines)


def handle_command(session, raw):
    """Apply one input line to session. Returns False when the user quits."""
    cmd = raw.strip().lower()
    if cmd in ("q", "quit"):
        return False
    if cmd in ("u", "undo"):
        session.undo()
    elif cmd in ("r", "reset"):
        session.reset()
    elif cmd in ("t", "toggle"):
        session.toggle_show_stone_colors()
    elif cmd in ("h", "help", "?"):
        print(HELP_TEXT)
    else:
        try:
            row_str, col_str = cmd.split()
            row, col = int(row_str), int(col_str)
        except ValueError:
            print("Invalid input format; expected two integers or a command")
            print(HELP_TEXT)
            return True
        try:
            session.place(row, col)
        except OutOfBoundsError as exc:
            print(f"Rejected: {exc}")
    return True


def run(session, stdin=None):
    stdin = stdin or sys.stdin
    print(HELP_TEXT)
    while True:
        print(format_board(session.state))
        print(session.state.status_text)
        line = stdin.readline()
        if not line:
            break
        if not handle_command(session, line):
            break
    return session.state


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)
    board_size, show_stone_colors = resolve_options(args, settings)
    if board_size not in SUPPORTED_BOARD_SIZES:
        log_event(f"Note: board size {board_size} is not one of the presets {SUPPORTED_BOARD_SIZES}")

    session = GameSession(
        board_size=board_size,
        show_stone_colors=show_stone_colors,
        logger=silent if args.quiet else log_event,
    )
    state = run(session)
    print(state.status_text)


if __name__ == "__main__":
    main()
