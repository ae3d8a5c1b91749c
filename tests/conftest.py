from typing import Dict

import pytest

from bracketschedule.controllers import ScheduleController
from bracketschedule.engine import build_bracket, sync_attribution
from bracketschedule.ledger import InMemoryScoreLedger
from bracketschedule.models import ScoreEntry, ScoreRecord


def record(a=None, b=None) -> ScoreRecord:
    """Score record with ``None`` meaning the side was never entered."""
    entry_a = ScoreEntry.empty() if a is None else ScoreEntry.of(a)
    entry_b = ScoreEntry.empty() if b is None else ScoreEntry.of(b)
    return ScoreRecord(a=entry_a, b=entry_b)


@pytest.fixture
def bracket():
    return build_bracket()


@pytest.fixture
def play(bracket):
    """Return a helper deciding every game of some days (side A wins 10-3)."""

    def _play(*days, scores=None) -> Dict[str, ScoreRecord]:
        played = dict(scores or {})
        for day in days:
            for game in bracket.day_games(day):
                played[game.id] = record(10, 3)
        return sync_attribution(bracket, played)

    return _play


@pytest.fixture
def ledger():
    return InMemoryScoreLedger()


@pytest.fixture
def controller(bracket, ledger):
    controller = ScheduleController(bracket, ledger)
    controller.refresh()
    return controller
