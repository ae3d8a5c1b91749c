"""Winner and opponent resolution.

Everything here is a pure function of the bracket and a ledger mapping;
nothing is cached and the ledger is never mutated.
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

from typing import Dict, Iterable, Optional

from bracketschedule.constants import TBD, WINNER_PLACEHOLDER
from bracketschedule.models.game import Bracket, Game
from bracketschedule.models.score import ScoreRecord
from bracketschedule.type_hints import Matchup, Scores


def winner_of(game_id: str, scores: Scores) -> Optional[str]:
    """Return the winner of a game, or None while it is undecided.

    A game is undecided when it has no record, when either side has no
    numeric value, or when the two values are equal. Ties never produce
    a winner. The name returned is the one attributed in the record.
    """
    record = scores.get(game_id)
    if record is None:
        return None
    return record.winner


def _opponent(dependency_id: Optional[str], scores: Scores) -> str:
    if not dependency_id:
        return TBD
    return winner_of(dependency_id, scores) or WINNER_PLACEHOLDER.format(
        game_id=dependency_id
    )


def teams_for(game: Game, scores: Scores) -> Matchup:
    """Return the two opponent names for a game.

    Seeded games return their teams unchanged. Later rounds take the winners
    of the games they depend on, or ``"Winner <id>"`` placeholders while a
    dependency is undecided.
    """
    if game.team_a is not None and game.team_b is not None:
        return game.team_a, game.team_b

    deps = list(game.depends_on) + [None, None]
    return _opponent(deps[0], scores), _opponent(deps[1], scores)


def sync_attribution(
    games: Iterable[Game], scores: Scores
) -> Dict[str, ScoreRecord]:
    """Return a copy of ``scores`` attributed to the currently resolved names.

    Every game in ``games`` gets a record, created empty if missing, whose
    team names match :func:`teams_for`. Games must be given in bracket order
    so each round sees the refreshed attribution of the one before it.
    """
    synced: Dict[str, ScoreRecord] = dict(scores)
    for game in games:
        team_a, team_b = teams_for(game, synced)
        record = synced.get(game.id) or ScoreRecord()
        if (record.team_a, record.team_b) != (team_a, team_b):
            record = record.with_teams(team_a, team_b)
        synced[game.id] = record
    return synced


def champion(bracket: Bracket, scores: Scores) -> Optional[str]:
    """Winner of the final, or None until it is decided."""
    return winner_of(bracket.final.id, scores)
