"""Bracket progression engine for Bracket Schedule.

This package holds the pure parts of the system: building the bracket,
resolving winners and opponents from a ledger, gating days, and filtering
the schedule.
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

from bracketschedule.engine.builder import build_bracket, pad_team_names
from bracketschedule.engine.day_gate import (
    BracketPhase,
    DayGate,
    compute_locked_days,
    is_day_complete,
    is_game_complete,
)
from bracketschedule.engine.resolver import (
    champion,
    sync_attribution,
    teams_for,
    winner_of,
)
from bracketschedule.engine.view_filter import filter_games

__all__ = [
    "BracketPhase",
    "DayGate",
    "build_bracket",
    "champion",
    "compute_locked_days",
    "filter_games",
    "is_day_complete",
    "is_game_complete",
    "pad_team_names",
    "sync_attribution",
    "teams_for",
    "winner_of",
]
