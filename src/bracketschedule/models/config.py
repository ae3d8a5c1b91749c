"""BracketConfig data class."""

# Bracket Schedule
# Copyright (C) 2025  Bracket Schedule developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from bracketschedule.constants import (
    DEFAULT_COURT_NAME,
    DEFAULT_DAY1_EVENING_START,
    DEFAULT_DAY1_MORNING_START,
    DEFAULT_DAY2_EVENING_START,
    DEFAULT_DAY2_MORNING_START,
    DEFAULT_DAY3_EVENING_START,
    DEFAULT_DAY3_MORNING_START,
    DEFAULT_GAME_GAP_MINUTES,
)
from bracketschedule.exceptions import FileLoadException, InvalidConfigurationException

# Option names used by the web schedule, mapped onto dataclass fields
_CAMEL_CASE_KEYS = {
    "courtName": "court_name",
    "day1MorningStart": "day1_morning_start",
    "day1EveningStart": "day1_evening_start",
    "day2MorningStart": "day2_morning_start",
    "day2EveningStart": "day2_evening_start",
    "day3MorningStart": "day3_morning_start",
    "day3EveningStart": "day3_evening_start",
    "gameGapMinutes": "game_gap_minutes",
}


@dataclass
class BracketConfig:
    """Schedule configuration settings.

    Every field has a default; start times are only checked when the
    bracket is built.

    Attributes
    ----------
    day1_morning_start, day1_evening_start : str
        Start of the first game of each half of Day 1.
    day2_morning_start, day2_evening_start : str
        Same for Day 2.
    day3_morning_start, day3_evening_start : str
        Semifinal 1 and semifinal 2 kickoffs; the final follows semifinal 2.
    court_name : str
        Venue label stamped on every game.
    teams : list of str
        Team names in seeding order. Missing slots are padded and names
        past the sixteenth are ignored when the bracket is built.
    game_gap_minutes : int
        Minutes between consecutive games in one half of a day.
    """

    day1_morning_start: str = DEFAULT_DAY1_MORNING_START
    day1_evening_start: str = DEFAULT_DAY1_EVENING_START
    day2_morning_start: str = DEFAULT_DAY2_MORNING_START
    day2_evening_start: str = DEFAULT_DAY2_EVENING_START
    day3_morning_start: str = DEFAULT_DAY3_MORNING_START
    day3_evening_start: str = DEFAULT_DAY3_EVENING_START
    court_name: str = DEFAULT_COURT_NAME
    teams: List[str] = field(default_factory=list)
    game_gap_minutes: int = DEFAULT_GAME_GAP_MINUTES

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "day1_morning_start": self.day1_morning_start,
            "day1_evening_start": self.day1_evening_start,
            "day2_morning_start": self.day2_morning_start,
            "day2_evening_start": self.day2_evening_start,
            "day3_morning_start": self.day3_morning_start,
            "day3_evening_start": self.day3_evening_start,
            "court_name": self.court_name,
            "teams": list(self.teams),
            "game_gap_minutes": self.game_gap_minutes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BracketConfig":
        """Deserialize configuration from dictionary.

        Accepts the snake_case keys written by :meth:`to_dict` as well as
        the camelCase option names of the web schedule. Blank values fall
        back to the defaults.
        """
        normalized: Dict[str, Any] = {}
        for key, value in data.items():
            normalized[_CAMEL_CASE_KEYS.get(key, key)] = value

        defaults = cls()
        teams = normalized.get("teams") or []
        if not isinstance(teams, list):
            raise InvalidConfigurationException("teams must be a list of names")

        gap = normalized.get("game_gap_minutes", defaults.game_gap_minutes)
        try:
            gap = int(gap)
        except (TypeError, ValueError):
            raise InvalidConfigurationException(
                f"game_gap_minutes must be an integer, got {gap!r}"
            ) from None

        return cls(
            day1_morning_start=normalized.get("day1_morning_start")
            or defaults.day1_morning_start,
            day1_evening_start=normalized.get("day1_evening_start")
            or defaults.day1_evening_start,
            day2_morning_start=normalized.get("day2_morning_start")
            or defaults.day2_morning_start,
            day2_evening_start=normalized.get("day2_evening_start")
            or defaults.day2_evening_start,
            day3_morning_start=normalized.get("day3_morning_start")
            or defaults.day3_morning_start,
            day3_evening_start=normalized.get("day3_evening_start")
            or defaults.day3_evening_start,
            court_name=normalized.get("court_name") or defaults.court_name,
            teams=[str(t) if t is not None else "" for t in teams],
            game_gap_minutes=gap,
        )


def load_config(path: Union[str, Path]) -> BracketConfig:
    """Read a :class:`BracketConfig` from a JSON file.

    Raises:
        FileLoadException: If the file is missing or is not valid JSON
        InvalidConfigurationException: If the content is not a JSON object
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileLoadException(f"Could not load config {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationException(f"Config {path} must be a JSON object")
    return BracketConfig.from_dict(data)
