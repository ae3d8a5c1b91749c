"""SQLite storage for the score service.

One instance per server lifetime, backed by a single SQLite file
(or ``:memory:`` for tests).
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

import sqlite3
import threading
from datetime import datetime, timezone
from typing import Dict

from bracketschedule.constants import DEFAULT_DB_PATH
from bracketschedule.exceptions import LedgerUnavailableException
from bracketschedule.utils import setup_logger

logger = setup_logger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ScoreStore:
    """Thin wrapper around SQLite holding one row per scored game."""

    def __init__(self, path: str = DEFAULT_DB_PATH):
        self.path = path
        try:
            self._conn = sqlite3.connect(path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA journal_mode=WAL")
            self._create_tables()
        except sqlite3.Error as e:
            raise LedgerUnavailableException(f"Could not open score store {path}: {e}") from e
        self._lock = threading.Lock()
        logger.info(f"Score store opened: {path}")

    def _create_tables(self) -> None:
        self._conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS scores (
                game_id TEXT PRIMARY KEY,
                a INTEGER NOT NULL,
                b INTEGER NOT NULL,
                updated_at TEXT
            );
            """
        )

    def all_scores(self) -> Dict[str, Dict[str, int]]:
        """Return ``{game_id: {"a": int, "b": int}}`` for every scored game."""
        with self._lock:
            rows = self._conn.execute("SELECT game_id, a, b FROM scores").fetchall()
        return {row["game_id"]: {"a": row["a"], "b": row["b"]} for row in rows}

    def upsert(self, game_id: str, a: int, b: int) -> None:
        """Insert or replace the score of one game."""
        with self._lock:
            try:
                self._conn.execute(
                    "INSERT INTO scores (game_id, a, b, updated_at) VALUES (?, ?, ?, ?) "
                    "ON CONFLICT(game_id) DO UPDATE SET "
                    "a = excluded.a, b = excluded.b, updated_at = excluded.updated_at",
                    (game_id, a, b, _now()),
                )
                self._conn.commit()
            except (sqlite3.Error, OverflowError) as e:
                raise LedgerUnavailableException(
                    f"Could not store score for {game_id}: {e}"
                ) from e

    def clear(self) -> int:
        """Delete every score. Returns how many rows were removed."""
        with self._lock:
            cursor = self._conn.execute("DELETE FROM scores")
            self._conn.commit()
        return cursor.rowcount

    def close(self) -> None:
        self._conn.close()
