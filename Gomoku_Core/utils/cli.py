"""CLI options for board size, display preference, and the settings path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku (five in a row) for two players at one terminal")
    parser.add_argument("--board-size", type=int, help="Board size (9 or 13 recommended, at least 5)")
    parser.add_argument(
        "--show-stone-colors",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show or hide which player owns each stone (default from settings)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--quiet", action="store_true", help="Suppress event log lines")
    return parser.parse_args(argv)
