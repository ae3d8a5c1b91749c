import pytest

from bracketschedule.constants import DAY_1, DAY_2, DAY_3
from bracketschedule.engine import champion, sync_attribution, teams_for, winner_of
from bracketschedule.models import ScoreEntry, ScoreRecord


def scored(a, b, team_a="", team_b=""):
    return ScoreRecord(
        a=ScoreEntry.from_raw(a), b=ScoreEntry.from_raw(b), team_a=team_a, team_b=team_b
    )


def test_seeded_games_return_their_teams(bracket):
    assert teams_for(bracket.get("D1G1"), {}) == ("Team 1", "Team 2")


def test_undecided_dependencies_show_placeholders(bracket):
    assert teams_for(bracket.get("D2G1"), {}) == ("Winner D1G1", "Winner D1G2")
    assert teams_for(bracket.final, {}) == ("Winner D3SF1", "Winner D3SF2")


def test_first_game_winner_advances(bracket):
    scores = sync_attribution(bracket, {"D1G1": scored(10, 3)})

    assert winner_of("D1G1", scores) == "Team 1"
    assert teams_for(bracket.get("D2G1"), scores) == ("Team 1", "Winner D1G2")
    # unchanged ledger, unchanged answer
    assert teams_for(bracket.get("D2G1"), scores) == ("Team 1", "Winner D1G2")


def test_side_b_can_win(bracket):
    scores = sync_attribution(bracket, {"D1G2": scored(7, 21)})
    assert winner_of("D1G2", scores) == "Team 4"
    assert teams_for(bracket.get("D2G1"), scores) == ("Winner D1G1", "Team 4")


@pytest.mark.parametrize("value", [0, 5, 99, 2.5])
def test_ties_are_undecided(value):
    scores = {"D1G1": scored(value, value, "Team 1", "Team 2")}
    assert winner_of("D1G1", scores) is None


@pytest.mark.parametrize(
    "a, b", [(None, 3), (10, None), ("", ""), ("abc", 4), (float("nan"), 1)]
)
def test_missing_or_non_numeric_sides_are_undecided(a, b):
    scores = {"D1G1": scored(a, b, "Team 1", "Team 2")}
    assert winner_of("D1G1", scores) is None


def test_unknown_game_is_undecided():
    assert winner_of("D1G1", {}) is None


def test_winner_is_the_attributed_name():
    scores = {"D1G1": scored(10, 3, "Sharks", "Eels")}
    assert winner_of("D1G1", scores) == "Sharks"
    assert winner_of("D1G2", {"D1G2": scored(10, 3)}) is None


def test_sync_attribution_creates_every_record_without_mutating(bracket):
    original = {"D1G1": scored(10, 3)}
    synced = sync_attribution(bracket, original)

    assert set(synced) == {g.id for g in bracket}
    assert original == {"D1G1": scored(10, 3)}
    assert synced["D1G1"].team_a == "Team 1"
    assert synced["D2G1"].team_b == "Winner D1G2"
    assert not synced["D2G1"].a.entered
    assert sync_attribution(bracket, synced) == synced


def test_attribution_follows_corrected_upstream_score(bracket):
    scores = sync_attribution(bracket, {"D1G1": scored(10, 3)})
    scores["D1G1"] = scores["D1G1"].with_entry("a", ScoreEntry.of(1))
    scores = sync_attribution(bracket, scores)
    assert scores["D2G1"].team_a == "Team 2"


def test_full_bracket_produces_champion(bracket, play):
    scores = play(DAY_1, DAY_2)
    assert teams_for(bracket.get("D3SF1"), scores) == ("Team 1", "Team 5")
    assert teams_for(bracket.get("D3SF2"), scores) == ("Team 9", "Team 13")
    assert champion(bracket, scores) is None

    scores = play(DAY_3, scores=scores)
    assert teams_for(bracket.final, scores) == ("Team 1", "Team 9")
    assert champion(bracket, scores) == "Team 1"
