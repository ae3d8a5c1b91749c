from datetime import datetime

import pytest

from bracketschedule.exceptions import GameNotFoundException, InvalidGameException
from bracketschedule.models import (
    Bracket,
    Game,
    LedgerSnapshot,
    ScoreEntry,
    ScoreRecord,
    scores_from_dict,
    scores_to_dict,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, ScoreEntry()),
        ("", ScoreEntry()),
        ("  ", ScoreEntry()),
        (True, ScoreEntry()),
        ("x", ScoreEntry()),
        (float("inf"), ScoreEntry()),
        (0, ScoreEntry(entered=True, value=0)),
        ("12", ScoreEntry(entered=True, value=12)),
        (3.0, ScoreEntry(entered=True, value=3)),
        (2.5, ScoreEntry(entered=True, value=2.5)),
    ],
)
def test_score_entry_from_raw(raw, expected):
    assert ScoreEntry.from_raw(raw) == expected


def test_zero_is_not_the_same_as_empty():
    assert ScoreEntry.of(0).display == "0"
    assert ScoreEntry.empty().display == ""
    assert ScoreEntry.of(0) != ScoreEntry.empty()


def test_score_record_serialization():
    record = ScoreRecord.from_dict({"a": 3, "b": "", "teamA": "Sharks", "team_b": "Eels"})
    assert record.a == ScoreEntry.of(3)
    assert not record.b.entered
    assert record.team_b == "Eels"
    assert record.to_dict() == {"a": 3, "b": "", "teamA": "Sharks", "teamB": "Eels"}

    scores = scores_from_dict({"D1G1": {"a": 1, "b": 2}, "junk": 5})
    assert list(scores) == ["D1G1"]
    assert scores_to_dict(scores)["D1G1"]["b"] == 2


def test_score_record_side_access():
    record = ScoreRecord().with_entry("b", ScoreEntry.of(4))
    assert record.entry("b").value == 4
    with pytest.raises(ValueError):
        record.entry("c")


def test_snapshot_from_payload():
    snapshot = LedgerSnapshot.from_payload(
        {"scores": {"D1G1": {"a": 10, "b": 3}}, "canEdit": True}
    )
    assert snapshot.can_edit
    assert snapshot.scores["D1G1"].is_decided
    assert isinstance(snapshot.fetched_at, datetime)
    assert not LedgerSnapshot.from_payload({}).can_edit


def test_game_invariants():
    with pytest.raises(InvalidGameException):
        Game("X", "Day 1", "Morning", "8:00 AM", "Court", team_a="A")
    with pytest.raises(InvalidGameException):
        Game("X", "Day 2", "Morning", "8:00 AM", "Court", depends_on=("D1G1",))
    with pytest.raises(InvalidGameException):
        Game(
            "X", "Day 2", "Morning", "8:00 AM", "Court",
            team_a="A", team_b="B", depends_on=("D1G1", "D1G2"),
        )


def test_bracket_lookup_and_serialization(bracket):
    assert "D2G3" in bracket
    assert bracket.get("D2G3").depends_on == ("D1G5", "D1G6")
    with pytest.raises(GameNotFoundException):
        bracket.get("D4G1")
    assert Bracket.from_dict(bracket.to_dict()) == bracket
