from bracketschedule.models.config import BracketConfig, load_config
from bracketschedule.models.game import Bracket, Game
from bracketschedule.models.score import (
    LedgerSnapshot,
    ScoreEntry,
    ScoreRecord,
    scores_from_dict,
    scores_to_dict,
)

__all__ = [
    "Bracket",
    "BracketConfig",
    "Game",
    "LedgerSnapshot",
    "ScoreEntry",
    "ScoreRecord",
    "load_config",
    "scores_from_dict",
    "scores_to_dict",
]
