"""HTTP score service for sharing one ledger between many viewers."""

from bracketschedule.server.app import create_app, main
from bracketschedule.server.settings import ServerSettings
from bracketschedule.server.store import ScoreStore

__all__ = ["ScoreStore", "ServerSettings", "create_app", "main"]
