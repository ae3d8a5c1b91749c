import pytest

from bracketschedule.constants import DAY_1, DAY_2, DAY_3, EVENING, FILTER_ALL, MORNING
from bracketschedule.engine import filter_games


@pytest.mark.parametrize(
    "day, time_slot, expected",
    [
        (DAY_1, MORNING, ["D1G1", "D1G2", "D1G3", "D1G4"]),
        (DAY_1, EVENING, ["D1G5", "D1G6", "D1G7", "D1G8"]),
        (DAY_2, FILTER_ALL, ["D2G1", "D2G2", "D2G3", "D2G4"]),
        (DAY_3, EVENING, ["D3SF2", "D3F"]),
        (FILTER_ALL, MORNING, ["D1G1", "D1G2", "D1G3", "D1G4", "D2G1", "D2G2", "D3SF1"]),
    ],
)
def test_filter_games(bracket, day, time_slot, expected):
    assert [g.id for g in filter_games(bracket, day, time_slot)] == expected


def test_no_filter_returns_everything_in_order(bracket):
    assert filter_games(bracket) == list(bracket)
    assert filter_games(bracket, FILTER_ALL, FILTER_ALL) == list(bracket)


def test_unknown_day_matches_nothing(bracket):
    assert filter_games(bracket, "Day 4") == []
    assert filter_games([], DAY_1) == []
