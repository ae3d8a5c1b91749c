import json

import pytest

from bracketschedule.constants import ALL_GAME_IDS
from bracketschedule.exceptions import (
    FileLoadException,
    LedgerUnavailableException,
    ScoreValidationException,
    UnauthorizedException,
)
from bracketschedule.ledger import InMemoryScoreLedger
from bracketschedule.utils.validation import MISSING_GAME_MESSAGE, TIE_MESSAGE


def test_submit_and_fetch():
    ledger = InMemoryScoreLedger()
    ledger.submit("D1G1", 10, 3)
    ledger.submit("D1G1", 11, 3)

    snapshot = ledger.fetch()
    assert snapshot.can_edit
    assert list(snapshot.scores) == ["D1G1"]
    assert snapshot.scores["D1G1"].a.value == 11
    assert snapshot.scores["D1G1"].team_a == ""


@pytest.mark.parametrize(
    "game_id, a, b, message",
    [
        ("D1G1", 5, 5, TIE_MESSAGE),
        ("D1G1", -1, 5, "non-negative"),
        ("D1G1", 1.5, 5, "non-negative"),
        ("", 1, 2, MISSING_GAME_MESSAGE),
        ("D9G9", 1, 2, "Unknown gameId"),
    ],
)
def test_rejected_submissions_leave_ledger_unchanged(game_id, a, b, message):
    ledger = InMemoryScoreLedger(game_ids=ALL_GAME_IDS)
    with pytest.raises(ScoreValidationException, match=message):
        ledger.submit(game_id, a, b)
    assert ledger.fetch().scores == {}


def test_read_only_ledger_refuses_writes():
    ledger = InMemoryScoreLedger(can_edit=False)
    assert not ledger.fetch().can_edit
    with pytest.raises(UnauthorizedException, match="Not allowed"):
        ledger.submit("D1G1", 2, 1)
    with pytest.raises(UnauthorizedException):
        ledger.reset()


def test_scores_persist_to_json(tmp_path):
    path = tmp_path / "scores.json"
    ledger = InMemoryScoreLedger(path=path)
    ledger.submit("D1G2", 4, 9)

    assert json.loads(path.read_text()) == {"scores": {"D1G2": {"a": 4, "b": 9}}}
    reloaded = InMemoryScoreLedger(path=path)
    assert reloaded.fetch().scores["D1G2"].b.value == 9

    reloaded.reset()
    assert InMemoryScoreLedger(path=path).fetch().scores == {}


def test_corrupt_ledger_file(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"scores": {"D1G1": {"a": 3, "b": 3}}}))
    with pytest.raises(FileLoadException):
        InMemoryScoreLedger(path=path)

    path.write_text("nope")
    with pytest.raises(FileLoadException):
        InMemoryScoreLedger(path=path)


def test_failed_save_keeps_previous_scores(tmp_path):
    ledger = InMemoryScoreLedger(path=tmp_path / "missing" / "scores.json")
    with pytest.raises(LedgerUnavailableException):
        ledger.submit("D1G1", 2, 1)
    assert ledger.fetch().scores == {}
