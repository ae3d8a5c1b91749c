"""Terminal interface for Bracket Schedule."""

from bracketschedule.console.cli import main

__all__ = ["main"]
