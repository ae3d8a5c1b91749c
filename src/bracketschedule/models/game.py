"""Game and Bracket data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from bracketschedule.constants import DAYS, FINAL_ID
from bracketschedule.exceptions import GameNotFoundException, InvalidGameException


@dataclass(frozen=True)
class Game:
    """A single scheduled game in the bracket.

    Attributes
    ----------
    id : str
        Stable round-scoped identifier, e.g. ``"D1G3"`` or ``"D3F"``.
    day : str
        One of ``"Day 1"``, ``"Day 2"``, ``"Day 3"``.
    time_slot : str
        ``"Morning"`` or ``"Evening"``.
    kickoff : str
        12-hour clock time derived from the day's start time.
    court : str
        Venue label, the same for every game of one build.
    team_a, team_b : str or None
        Seeded team names. Only Day 1 games carry them.
    depends_on : tuple of str
        Ids of the two games whose winners become ``team_a`` and ``team_b``.
        Empty for Day 1.
    label : str or None
        Optional round name such as ``"Championship Game"``.
    """

    id: str
    day: str
    time_slot: str
    kickoff: str
    court: str
    team_a: Optional[str] = None
    team_b: Optional[str] = None
    depends_on: Tuple[str, ...] = ()
    label: Optional[str] = None

    def __post_init__(self):
        # Stored as a tuple so the game stays hashable whatever was passed in
        object.__setattr__(self, "depends_on", tuple(self.depends_on))

        seeded = self.team_a is not None and self.team_b is not None
        partially_seeded = (self.team_a is None) != (self.team_b is None)
        if partially_seeded:
            raise InvalidGameException(f"Game {self.id} has only one seeded team")
        if seeded and self.depends_on:
            raise InvalidGameException(
                f"Game {self.id} cannot have both seeded teams and dependencies"
            )
        if not seeded and len(self.depends_on) != 2:
            raise InvalidGameException(
                f"Game {self.id} needs two seeded teams or exactly two dependencies"
            )

    @property
    def is_seeded(self) -> bool:
        """True for games whose teams are assigned directly."""
        return self.team_a is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize game to dictionary."""
        return {
            "id": self.id,
            "day": self.day,
            "time_slot": self.time_slot,
            "kickoff": self.kickoff,
            "court": self.court,
            "team_a": self.team_a,
            "team_b": self.team_b,
            "depends_on": list(self.depends_on),
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        """Deserialize game from dictionary."""
        return cls(
            id=data["id"],
            day=data["day"],
            time_slot=data["time_slot"],
            kickoff=data["kickoff"],
            court=data["court"],
            team_a=data.get("team_a"),
            team_b=data.get("team_b"),
            depends_on=tuple(data.get("depends_on", ())),
            label=data.get("label"),
        )


@dataclass(frozen=True)
class Bracket:
    """The full, immutable 15-game dependency graph.

    Games are kept in creation order: the eight Day 1 games, the four
    Day 2 games, then both semifinals and the final.
    """

    games: Tuple[Game, ...]
    by_id: Dict[str, Game] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "games", tuple(self.games))
        object.__setattr__(self, "by_id", {g.id: g for g in self.games})

    def __iter__(self) -> Iterator[Game]:
        return iter(self.games)

    def __len__(self) -> int:
        return len(self.games)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self.by_id

    def get(self, game_id: str) -> Game:
        """Look up a game by id.

        Raises:
            GameNotFoundException: If the id is not part of the bracket
        """
        try:
            return self.by_id[game_id]
        except KeyError:
            raise GameNotFoundException(f"Unknown game: {game_id}") from None

    def day_games(self, day: str) -> List[Game]:
        """All games of one day in schedule order."""
        return [g for g in self.games if g.day == day]

    @property
    def days(self) -> Tuple[str, ...]:
        return DAYS

    @property
    def final(self) -> Game:
        return self.get(FINAL_ID)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bracket to dictionary."""
        return {"games": [g.to_dict() for g in self.games]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bracket":
        """Deserialize bracket from dictionary."""
        return cls(games=tuple(Game.from_dict(g) for g in data.get("games", [])))
