"""Type hints used in Bracket Schedule."""

from typing import TYPE_CHECKING, Dict, Literal, Mapping, Tuple

if TYPE_CHECKING:
    from bracketschedule.models.score import ScoreRecord

# Tournament day literals (for type hints)
Day = Literal["Day 1", "Day 2", "Day 3"]

# Half of a day a game is played in
TimeSlot = Literal["Morning", "Evening"]

# Which side of a score record an edit targets
Side = Literal["a", "b"]

# Resolved (team_a, team_b) names for a game
Matchup = Tuple[str, str]
# Game id -> score record
Scores = Mapping[str, "ScoreRecord"]
# Day -> is the day locked
LockedDays = Dict[str, bool]

#  LocalWords:  Matchup
