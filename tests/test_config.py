import json

import pytest

from bracketschedule.constants import DEFAULT_COURT_NAME, DEFAULT_DAY1_MORNING_START
from bracketschedule.exceptions import FileLoadException, InvalidConfigurationException
from bracketschedule.models import BracketConfig, load_config


def test_defaults():
    config = BracketConfig()
    assert config.day1_morning_start == DEFAULT_DAY1_MORNING_START
    assert config.court_name == DEFAULT_COURT_NAME
    assert config.teams == []
    assert config.game_gap_minutes == 60


def test_round_trip():
    config = BracketConfig(court_name="Court 2", teams=["A", "B"], game_gap_minutes=30)
    assert BracketConfig.from_dict(config.to_dict()) == config


def test_camel_case_keys_and_blank_values():
    config = BracketConfig.from_dict(
        {
            "courtName": "Sharks Arena",
            "day2EveningStart": "6:30 PM",
            "day3MorningStart": "",
            "gameGapMinutes": "90",
            "teams": ["Dolphins", None],
        }
    )
    assert config.court_name == "Sharks Arena"
    assert config.day2_evening_start == "6:30 PM"
    assert config.day3_morning_start == "10:00 AM"
    assert config.game_gap_minutes == 90
    assert config.teams == ["Dolphins", ""]


def test_invalid_values_raise():
    with pytest.raises(InvalidConfigurationException):
        BracketConfig.from_dict({"gameGapMinutes": "soon"})
    with pytest.raises(InvalidConfigurationException):
        BracketConfig.from_dict({"teams": "Dolphins"})


def test_load_config(tmp_path):
    path = tmp_path / "bracket.json"
    path.write_text(json.dumps({"courtName": "Pool Court", "teams": ["X"]}))
    config = load_config(path)
    assert config.court_name == "Pool Court"
    assert config.teams == ["X"]


def test_load_config_errors(tmp_path):
    with pytest.raises(FileLoadException):
        load_config(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(FileLoadException):
        load_config(broken)

    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]")
    with pytest.raises(InvalidConfigurationException):
        load_config(listed)
