"""Bracket graph construction.

Builds the fixed 15-game, three-day single-elimination graph from 16 team
names and the per-day start times.
"""

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

from typing import List, Optional, Sequence

from bracketschedule.constants import (
    DAY1_GAME_IDS,
    DAY2_GAME_IDS,
    DAY_1,
    DAY_2,
    DAY_3,
    EVENING,
    FINAL_ID,
    FINAL_LABEL,
    MORNING,
    NUM_TEAMS,
    SEMIFINAL_1_ID,
    SEMIFINAL_1_LABEL,
    SEMIFINAL_2_ID,
    SEMIFINAL_2_LABEL,
    TEAM_PLACEHOLDER,
)
from bracketschedule.exceptions import (
    InvalidConfigurationException,
    TimeFormatException,
)
from bracketschedule.models.config import BracketConfig
from bracketschedule.models.game import Bracket, Game
from bracketschedule.utils import setup_logger
from bracketschedule.utils.clock import add_minutes

logger = setup_logger(__name__)

# Day 1 games feeding each Day 2 game, in Day 2 order
DAY2_FEEDS = (
    ("D1G1", "D1G2"),
    ("D1G3", "D1G4"),
    ("D1G5", "D1G6"),
    ("D1G7", "D1G8"),
)


def pad_team_names(teams: Optional[Sequence[Optional[str]]]) -> List[str]:
    """Return exactly 16 team names.

    Names are stripped; missing or blank slots become ``"Team N"`` and names
    past the sixteenth are dropped.
    """
    supplied = list(teams or [])[:NUM_TEAMS]
    padded = []
    for i in range(NUM_TEAMS):
        name = supplied[i] if i < len(supplied) else None
        name = (name or "").strip()
        padded.append(name or TEAM_PLACEHOLDER.format(n=i + 1))
    return padded


def _kickoff(start: str, offset: int) -> str:
    try:
        return add_minutes(start, offset)
    except TimeFormatException as e:
        raise InvalidConfigurationException(f"Invalid start time: {e}") from e


def _build_day1(teams: List[str], config: BracketConfig) -> List[Game]:
    gap = config.game_gap_minutes
    games = []
    for i, game_id in enumerate(DAY1_GAME_IDS):
        morning = i < 4
        start = config.day1_morning_start if morning else config.day1_evening_start
        idx = i if morning else i - 4
        games.append(
            Game(
                id=game_id,
                day=DAY_1,
                time_slot=MORNING if morning else EVENING,
                kickoff=_kickoff(start, idx * gap),
                court=config.court_name,
                team_a=teams[i * 2],
                team_b=teams[i * 2 + 1],
            )
        )
    return games


def _build_day2(config: BracketConfig) -> List[Game]:
    gap = config.game_gap_minutes
    games = []
    for i, (game_id, feeds) in enumerate(zip(DAY2_GAME_IDS, DAY2_FEEDS)):
        morning = i < 2
        start = config.day2_morning_start if morning else config.day2_evening_start
        games.append(
            Game(
                id=game_id,
                day=DAY_2,
                time_slot=MORNING if morning else EVENING,
                kickoff=_kickoff(start, (i % 2) * gap),
                court=config.court_name,
                depends_on=feeds,
            )
        )
    return games


def _build_day3(config: BracketConfig) -> List[Game]:
    court = config.court_name
    return [
        Game(
            id=SEMIFINAL_1_ID,
            day=DAY_3,
            time_slot=MORNING,
            kickoff=_kickoff(config.day3_morning_start, 0),
            court=court,
            depends_on=("D2G1", "D2G2"),
            label=SEMIFINAL_1_LABEL,
        ),
        Game(
            id=SEMIFINAL_2_ID,
            day=DAY_3,
            time_slot=EVENING,
            kickoff=_kickoff(config.day3_evening_start, 0),
            court=court,
            depends_on=("D2G3", "D2G4"),
            label=SEMIFINAL_2_LABEL,
        ),
        Game(
            id=FINAL_ID,
            day=DAY_3,
            time_slot=EVENING,
            kickoff=_kickoff(config.day3_evening_start, config.game_gap_minutes),
            court=court,
            depends_on=(SEMIFINAL_1_ID, SEMIFINAL_2_ID),
            label=FINAL_LABEL,
        ),
    ]


def build_bracket(
    teams: Optional[Sequence[Optional[str]]] = None,
    config: Optional[BracketConfig] = None,
) -> Bracket:
    """Build the 15-game bracket.

    Args:
        teams: Team names in seeding order; teams 1&2, 3&4, ... meet on Day 1.
            Defaults to ``config.teams``. Short lists are padded.
        config: Start times, court and game gap. Defaults to
            :class:`BracketConfig` defaults.

    Returns:
        The immutable Bracket

    Raises:
        InvalidConfigurationException: If a start time cannot be parsed
    """
    config = config or BracketConfig()
    names = pad_team_names(config.teams if teams is None else teams)

    games = _build_day1(names, config) + _build_day2(config) + _build_day3(config)
    bracket = Bracket(games=tuple(games))

    logger.info(
        "Built bracket: %d games on %s (Day 1 from %s)",
        len(bracket),
        config.court_name,
        config.day1_morning_start,
    )
    return bracket
