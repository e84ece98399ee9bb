"""Timestamped event log lines for game sessions and the terminal driver."""

import datetime
import sys


def log_event(message, stream=None):
    stamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{stamp}] {message}", file=stream or sys.stdout)


def silent(message):
    """Logger that drops every event; for tests and embedding."""
