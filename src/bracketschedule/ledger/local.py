"""Local-only score ledger.

Keeps scores in memory and, when given a path, mirrors them to a JSON file
so a single-machine schedule survives restarts.
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

import json
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from bracketschedule.exceptions import (
    FileLoadException,
    LedgerUnavailableException,
    ScoreValidationException,
    UnauthorizedException,
)
from bracketschedule.ledger.base import ScoreLedger
from bracketschedule.models.score import LedgerSnapshot, ScoreEntry, ScoreRecord
from bracketschedule.utils import setup_logger
from bracketschedule.utils.validation import (
    MISSING_GAME_MESSAGE,
    validate_score_pair_strict,
)

logger = setup_logger(__name__)


class InMemoryScoreLedger(ScoreLedger):
    """Score ledger held in this process.

    Parameters
    ----------
    can_edit : bool
        Capability reported to callers and enforced on writes.
    path : str or Path, optional
        JSON file to load from on construction and save to after each write.
    game_ids : iterable of str, optional
        When given, submissions for any other id are rejected.
    """

    def __init__(
        self,
        can_edit: bool = True,
        path: Optional[Union[str, Path]] = None,
        game_ids: Optional[Iterable[str]] = None,
    ):
        self.can_edit = can_edit
        self.path = Path(path) if path else None
        self.game_ids = frozenset(game_ids) if game_ids is not None else None
        self._scores: Dict[str, Tuple[int, int]] = {}

        if self.path and self.path.exists():
            self._load()

    def fetch(self) -> LedgerSnapshot:
        scores = {
            game_id: ScoreRecord(a=ScoreEntry.of(a), b=ScoreEntry.of(b))
            for game_id, (a, b) in self._scores.items()
        }
        return LedgerSnapshot(scores=scores, can_edit=self.can_edit)

    def submit(self, game_id: str, a: int, b: int) -> None:
        if not self.can_edit:
            raise UnauthorizedException("Not allowed")
        if not game_id:
            raise ScoreValidationException(MISSING_GAME_MESSAGE)
        if self.game_ids is not None and game_id not in self.game_ids:
            raise ScoreValidationException("Unknown gameId")

        updated = dict(self._scores)
        updated[game_id] = validate_score_pair_strict(a, b)
        self._save(updated)
        self._scores = updated
        logger.info("Recorded %s: %s-%s", game_id, a, b)

    def reset(self) -> None:
        if not self.can_edit:
            raise UnauthorizedException("Not allowed")
        self._save({})
        self._scores = {}
        logger.info("Score ledger cleared")

    def _load(self) -> None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            raw_scores = data.get("scores", {})
            self._scores = {
                game_id: validate_score_pair_strict(entry.get("a"), entry.get("b"))
                for game_id, entry in raw_scores.items()
            }
        except (OSError, ValueError, AttributeError, ScoreValidationException) as e:
            raise FileLoadException(
                f"Could not load score ledger {self.path}: {e}"
            ) from e
        logger.debug("Loaded %d scores from %s", len(self._scores), self.path)

    def _save(self, scores: Dict[str, Tuple[int, int]]) -> None:
        if not self.path:
            return
        data = {
            "scores": {game_id: {"a": a, "b": b} for game_id, (a, b) in scores.items()}
        }
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise LedgerUnavailableException(
                f"Could not save score ledger {self.path}: {e}"
            ) from e

    def __repr__(self) -> str:
        return f"InMemoryScoreLedger(can_edit={self.can_edit}, path={self.path})"
