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

# Bracket size
NUM_TEAMS = 16
NUM_GAMES = 15

# Days and time slots
DAY_1 = "Day 1"
DAY_2 = "Day 2"
DAY_3 = "Day 3"
DAYS = (DAY_1, DAY_2, DAY_3)

MORNING = "Morning"
EVENING = "Evening"
TIME_SLOTS = (MORNING, EVENING)

# Filter value meaning "match everything" (kept from the web schedule controls)
FILTER_ALL = "All"

# Default schedule configuration
DEFAULT_COURT_NAME = "Dolphins Court"
DEFAULT_DAY1_MORNING_START = "8:00 AM"
DEFAULT_DAY1_EVENING_START = "4:00 PM"
DEFAULT_DAY2_MORNING_START = "9:00 AM"
DEFAULT_DAY2_EVENING_START = "5:00 PM"
DEFAULT_DAY3_MORNING_START = "10:00 AM"
DEFAULT_DAY3_EVENING_START = "5:00 PM"
DEFAULT_GAME_GAP_MINUTES = 60  # 1 hour between games

# Game ids
DAY1_GAME_IDS = tuple(f"D1G{i}" for i in range(1, 9))
DAY2_GAME_IDS = ("D2G1", "D2G2", "D2G3", "D2G4")
SEMIFINAL_1_ID = "D3SF1"
SEMIFINAL_2_ID = "D3SF2"
FINAL_ID = "D3F"
DAY3_GAME_IDS = (SEMIFINAL_1_ID, SEMIFINAL_2_ID, FINAL_ID)
ALL_GAME_IDS = DAY1_GAME_IDS + DAY2_GAME_IDS + DAY3_GAME_IDS

# Round labels
SEMIFINAL_1_LABEL = "Semifinal 1"
SEMIFINAL_2_LABEL = "Semifinal 2"
FINAL_LABEL = "Championship Game"

# Placeholders
TEAM_PLACEHOLDER = "Team {n}"
WINNER_PLACEHOLDER = "Winner {game_id}"
TBD = "TBD"

# Score sides
SIDE_A = "a"
SIDE_B = "b"

# Day gate notices shown when a filtered day is locked
LOCK_NOTICES = {
    DAY_2: "Day 2 is locked. Complete all Day 1 games (enter scores) to unlock.",
    DAY_3: "Day 3 is locked. Complete all Day 2 games (enter scores) to unlock.",
}

# Score service
SCORES_ENDPOINT = "/api/scores"
DEFAULT_DB_PATH = "scores.db"
DEFAULT_HTTP_TIMEOUT = 10.0
