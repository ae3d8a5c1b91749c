"""Score ledger data classes."""

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

import math
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from bracketschedule.constants import SIDE_A, SIDE_B

Number = Union[int, float]


@dataclass(frozen=True)
class ScoreEntry:
    """One side of a score record.

    ``entered`` is kept apart from ``value`` so that "nothing typed yet" is
    never confused with a score of zero.

    Attributes
    ----------
    entered : bool
        Whether a usable numeric value is present.
    value : int or float
        The score. Meaningless when ``entered`` is False.
    """

    entered: bool = False
    value: Number = 0

    @classmethod
    def empty(cls) -> "ScoreEntry":
        return cls()

    @classmethod
    def of(cls, value: Number) -> "ScoreEntry":
        return cls(entered=True, value=value)

    @classmethod
    def from_raw(cls, raw: Any) -> "ScoreEntry":
        """Build an entry from whatever a ledger or form handed us.

        ``None``, blank strings, booleans, non-numeric text and non-finite
        numbers all become an empty entry.
        """
        if raw is None or isinstance(raw, bool):
            return cls()
        if isinstance(raw, str):
            raw = raw.strip()
            if not raw:
                return cls()
            try:
                raw = float(raw)
            except ValueError:
                return cls()
        if not isinstance(raw, (int, float)):
            return cls()
        if not math.isfinite(raw):
            return cls()
        if isinstance(raw, float) and raw.is_integer():
            raw = int(raw)
        return cls(entered=True, value=raw)

    @property
    def display(self) -> str:
        """Text shown in a score box: the value, or blank when not entered."""
        return str(self.value) if self.entered else ""

    def to_raw(self) -> Union[Number, str]:
        return self.value if self.entered else ""


@dataclass(frozen=True)
class ScoreRecord:
    """Submitted score for one game plus the team names it was entered for.

    The attributed names decide who a past result belongs to, even if the
    names shown for the game change later.
    """

    a: ScoreEntry = field(default_factory=ScoreEntry)
    b: ScoreEntry = field(default_factory=ScoreEntry)
    team_a: str = ""
    team_b: str = ""

    @property
    def is_decided(self) -> bool:
        """Both sides entered and not tied."""
        return self.a.entered and self.b.entered and self.a.value != self.b.value

    @property
    def winner(self) -> Optional[str]:
        """Attributed name of the higher side, or None while undecided."""
        if not self.is_decided:
            return None
        name = self.team_a if self.a.value > self.b.value else self.team_b
        return name or None

    def entry(self, side: str) -> ScoreEntry:
        if side == SIDE_A:
            return self.a
        if side == SIDE_B:
            return self.b
        raise ValueError(f"Unknown score side: {side!r}")

    def with_entry(self, side: str, entry: ScoreEntry) -> "ScoreRecord":
        """Return a copy with one side replaced."""
        if side == SIDE_A:
            return replace(self, a=entry)
        if side == SIDE_B:
            return replace(self, b=entry)
        raise ValueError(f"Unknown score side: {side!r}")

    def with_teams(self, team_a: str, team_b: str) -> "ScoreRecord":
        """Return a copy attributed to the given team names."""
        return replace(self, team_a=team_a, team_b=team_b)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize score record to dictionary."""
        return {
            "a": self.a.to_raw(),
            "b": self.b.to_raw(),
            "teamA": self.team_a,
            "teamB": self.team_b,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScoreRecord":
        """Deserialize score record from dictionary."""
        return cls(
            a=ScoreEntry.from_raw(data.get("a")),
            b=ScoreEntry.from_raw(data.get("b")),
            team_a=data.get("teamA") or data.get("team_a") or "",
            team_b=data.get("teamB") or data.get("team_b") or "",
        )


def scores_from_dict(data: Optional[Mapping[str, Any]]) -> Dict[str, ScoreRecord]:
    """Convert a ``{game_id: {"a", "b", ...}}`` mapping into score records."""
    scores: Dict[str, ScoreRecord] = {}
    for game_id, raw in (data or {}).items():
        if isinstance(raw, Mapping):
            scores[str(game_id)] = ScoreRecord.from_dict(raw)
    return scores


def scores_to_dict(scores: Mapping[str, ScoreRecord]) -> Dict[str, Dict[str, Any]]:
    """Serialize a ledger mapping to plain dictionaries."""
    return {game_id: record.to_dict() for game_id, record in scores.items()}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LedgerSnapshot:
    """The most recently fetched ledger state.

    Attributes
    ----------
    scores : dict
        Game id -> ScoreRecord.
    can_edit : bool
        Opaque capability from the identity collaborator.
    fetched_at : datetime
        When the snapshot was taken (UTC).
    """

    scores: Dict[str, ScoreRecord] = field(default_factory=dict)
    can_edit: bool = False
    fetched_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LedgerSnapshot":
        """Parse the score service's ``{"scores": ..., "canEdit": ...}`` body."""
        return cls(
            scores=scores_from_dict(payload.get("scores")),
            can_edit=bool(payload.get("canEdit", False)),
        )
