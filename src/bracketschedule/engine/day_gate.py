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

"""
Day gate state.

Days 2 and 3 open only once every game of the previous day has a decided
score. The state is recomputed from the ledger on every query; nothing is
stored, so clearing the ledger locks the later days again.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional

from bracketschedule.constants import DAY_1, DAY_2, DAY_3, DAYS, LOCK_NOTICES
from bracketschedule.engine.resolver import champion
from bracketschedule.models.game import Bracket, Game
from bracketschedule.type_hints import LockedDays, Scores


class BracketPhase(Enum):
    """
    Represents how far the bracket has progressed.

    Used to decide which day the schedule should focus on.
    """

    DAY_1 = auto()  # Day 1 games still being played
    DAY_2 = auto()  # Day 1 complete, Day 2 in progress
    DAY_3 = auto()  # Day 2 complete, semifinals/final in progress
    FINISHED = auto()  # Final decided


def is_game_complete(game_id: str, scores: Scores) -> bool:
    """A game is complete when its record holds two different numbers."""
    record = scores.get(game_id)
    return record is not None and record.is_decided


def is_day_complete(games: Iterable[Game], scores: Scores) -> bool:
    return all(is_game_complete(g.id, scores) for g in games)


def compute_locked_days(bracket: Bracket, scores: Scores) -> LockedDays:
    """Return ``{day: locked}`` for the three days."""
    return {
        DAY_1: False,
        DAY_2: not is_day_complete(bracket.day_games(DAY_1), scores),
        DAY_3: not is_day_complete(bracket.day_games(DAY_2), scores),
    }


@dataclass(frozen=True)
class DayGate:
    """
    Encapsulates the computed lock state of the three days.

    Attributes
    ----------
    locked : dict
        Day -> whether score entry for the day is locked
    complete : dict
        Day -> whether every game of the day is decided
    champion : str or None
        Winner of the final, once decided
    phase : BracketPhase
        Current phase of the bracket
    """

    locked: Dict[str, bool]
    complete: Dict[str, bool]
    champion: Optional[str]
    phase: BracketPhase

    @classmethod
    def compute(cls, bracket: Bracket, scores: Scores) -> "DayGate":
        """
        Compute the gate state for a ledger.

        Parameters
        ----------
        bracket : Bracket
            The bracket being played
        scores : mapping
            Game id -> ScoreRecord

        Returns
        -------
        DayGate
            The computed state object with all derived properties
        """
        complete = {day: is_day_complete(bracket.day_games(day), scores) for day in DAYS}
        locked = compute_locked_days(bracket, scores)
        winner = champion(bracket, scores)

        if winner is not None and not locked[DAY_3]:
            phase = BracketPhase.FINISHED
        elif not locked[DAY_3]:
            phase = BracketPhase.DAY_3
        elif not locked[DAY_2]:
            phase = BracketPhase.DAY_2
        else:
            phase = BracketPhase.DAY_1

        return cls(locked=locked, complete=complete, champion=winner, phase=phase)

    def is_locked(self, day: str) -> bool:
        return self.locked.get(day, False)

    @property
    def open_days(self) -> List[str]:
        return [day for day in DAYS if not self.is_locked(day)]

    def lock_notice(self, day: str) -> Optional[str]:
        """Message telling the user how to unlock ``day``, or None if open."""
        if not self.is_locked(day):
            return None
        return LOCK_NOTICES.get(day)
