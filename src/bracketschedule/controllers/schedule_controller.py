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
Schedule business logic controller.

This module separates score entry and bracket progression from the UI.
The ScheduleController handles:
- Fetching the ledger and keeping the last good snapshot
- Resolving opponents, winners and the champion
- Gating score entry by day
- Turning raw score boxes into ledger submissions
"""

from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from bracketschedule.constants import DAY_3, FILTER_ALL
from bracketschedule.engine.day_gate import DayGate
from bracketschedule.engine.resolver import sync_attribution
from bracketschedule.engine.view_filter import filter_games
from bracketschedule.exceptions import (
    GameNotFoundException,
    LedgerException,
    ScoreValidationException,
)
from bracketschedule.ledger.base import ScoreLedger
from bracketschedule.models.game import Bracket, Game
from bracketschedule.models.score import LedgerSnapshot, ScoreEntry, ScoreRecord
from bracketschedule.type_hints import LockedDays, Matchup
from bracketschedule.utils import setup_logger
from bracketschedule.utils.validation import (
    TIE_MESSAGE,
    sanitize_digits,
    validate_score_pair,
)

logger = setup_logger(__name__)

NOT_ALLOWED_MESSAGE = "Not allowed"


@dataclass
class RefreshResult:
    """Result of fetching the ledger."""

    success: bool
    warning: Optional[str] = None


@dataclass
class ScoreEditResult:
    """Result of a score edit, submission or reset."""

    success: bool
    saved: bool = False
    error_message: Optional[str] = None
    warning: Optional[str] = None


@dataclass
class GameView:
    """Everything a presentation layer needs to draw one game row."""

    game: Game
    team_a: str
    team_b: str
    score: ScoreRecord
    winner: Optional[str]
    locked: bool
    editable: bool

    @property
    def matchup(self) -> Matchup:
        return self.team_a, self.team_b


class ScheduleController:
    """
    Controller for the bracket schedule.

    The controller never owns scores. It keeps the most recent ledger
    snapshot plus the score boxes the user has typed into but not saved yet
    (drafts), and derives everything else from those on demand.

    Parameters
    ----------
    bracket : Bracket
        The bracket being played
    ledger : ScoreLedger
        Where scores are read from and submitted to
    """

    def __init__(self, bracket: Bracket, ledger: ScoreLedger):
        self.bracket = bracket
        self.ledger = ledger
        self._snapshot = LedgerSnapshot()
        self._drafts: Dict[str, ScoreRecord] = {}
        self._scores: Dict[str, ScoreRecord] = {}
        self._rebuild()

    # ========== Ledger State ==========

    def refresh(self) -> RefreshResult:
        """Fetch the ledger.

        Drafts for games the ledger has a record of are discarded, so stored
        results always win over unsaved boxes.

        When the ledger cannot be reached, the previous snapshot is kept and
        editing is disabled until a later fetch succeeds.
        """
        try:
            self._snapshot = self.ledger.fetch()
        except LedgerException as e:
            logger.warning(f"Could not fetch scores, keeping last snapshot: {e}")
            self._snapshot = replace(self._snapshot, can_edit=False)
            self._rebuild()
            return RefreshResult(success=False, warning=str(e))

        stale = [game_id for game_id in self._drafts if game_id in self._snapshot.scores]
        for game_id in stale:
            del self._drafts[game_id]
        self._rebuild()
        logger.debug(
            f"Refreshed {len(self._snapshot.scores)} scores "
            f"(can_edit={self._snapshot.can_edit})"
        )
        return RefreshResult(success=True)

    def _rebuild(self) -> None:
        merged = dict(self._snapshot.scores)
        merged.update(self._drafts)
        self._scores = sync_attribution(self.bracket, merged)

    @property
    def snapshot(self) -> LedgerSnapshot:
        return self._snapshot

    @property
    def scores(self) -> Dict[str, ScoreRecord]:
        """Current attributed scores, drafts included."""
        return dict(self._scores)

    @property
    def can_edit(self) -> bool:
        return self._snapshot.can_edit

    @property
    def day_gate(self) -> DayGate:
        return DayGate.compute(self.bracket, self._scores)

    @property
    def locked_days(self) -> LockedDays:
        return dict(self.day_gate.locked)

    @property
    def champion(self) -> Optional[str]:
        return self.day_gate.champion

    # ========== Resolution ==========

    def teams_for(self, game: Game) -> Matchup:
        record = self._scores[game.id]
        return record.team_a, record.team_b

    def winner_of(self, game_id: str) -> Optional[str]:
        record = self._scores.get(game_id)
        return record.winner if record else None

    def game_views(
        self, day: Optional[str] = None, time_slot: Optional[str] = None
    ) -> List[GameView]:
        """
        Build the rows to display for a day and time slot filter.

        Parameters
        ----------
        day : str, optional
            Day label, or None / "All"
        time_slot : str, optional
            Time slot, or None / "All"

        Returns
        -------
        list of GameView
            One view per matching game, in bracket order
        """
        gate = self.day_gate
        views = []
        for game in filter_games(self.bracket, day, time_slot):
            record = self._scores[game.id]
            locked = gate.is_locked(game.day)
            views.append(
                GameView(
                    game=game,
                    team_a=record.team_a,
                    team_b=record.team_b,
                    score=record,
                    winner=record.winner,
                    locked=locked,
                    editable=self.can_edit and not locked,
                )
            )
        return views

    def shows_bracket(self, day: Optional[str] = None) -> bool:
        """Whether the Day 3 bracket panel belongs on screen for a day filter."""
        if day not in (None, FILTER_ALL, DAY_3):
            return False
        return not self.day_gate.is_locked(DAY_3)

    # ========== Score Entry ==========

    def _check_editable(self, game_id: str) -> Optional[str]:
        try:
            game = self.bracket.get(game_id)
        except GameNotFoundException as e:
            return str(e)
        if not self.can_edit:
            return NOT_ALLOWED_MESSAGE
        gate = self.day_gate
        if gate.is_locked(game.day):
            return gate.lock_notice(game.day)
        return None

    def enter_score(self, game_id: str, side: str, raw: Optional[str]) -> ScoreEditResult:
        """
        Apply what the user typed into one score box.

        Only the digits of ``raw`` are kept; an empty box clears the side.
        The result is submitted once both sides hold numbers that differ.

        Parameters
        ----------
        game_id : str
            Game being scored
        side : str
            "a" or "b"
        raw : str
            Text from the score box

        Returns
        -------
        ScoreEditResult
            ``saved`` is True only when the ledger accepted the score
        """
        error = self._check_editable(game_id)
        if error:
            logger.warning(f"Rejected score edit for {game_id}: {error}")
            return ScoreEditResult(success=False, error_message=error)

        digits = sanitize_digits(raw)
        entry = ScoreEntry.of(int(digits)) if digits else ScoreEntry.empty()
        try:
            record = self._scores[game_id].with_entry(side, entry)
        except ValueError as e:
            return ScoreEditResult(success=False, error_message=str(e))

        self._drafts[game_id] = record
        self._rebuild()

        if not (record.a.entered and record.b.entered):
            return ScoreEditResult(success=True)
        if record.a.value == record.b.value:
            return ScoreEditResult(success=False, error_message=TIE_MESSAGE)
        return self._submit(game_id, record.a.value, record.b.value)

    def submit_score(self, game_id: str, a: int, b: int) -> ScoreEditResult:
        """Validate and submit a complete result for one game."""
        error = self._check_editable(game_id)
        if error:
            logger.warning(f"Rejected score for {game_id}: {error}")
            return ScoreEditResult(success=False, error_message=error)

        result = validate_score_pair(a, b)
        if not result:
            return ScoreEditResult(success=False, error_message=result.error_message)
        return self._submit(game_id, *result.sanitized_value)

    def _submit(self, game_id: str, a: int, b: int) -> ScoreEditResult:
        try:
            self.ledger.submit(game_id, a, b)
        except (LedgerException, ScoreValidationException) as e:
            logger.warning(f"Ledger rejected {game_id} {a}-{b}: {e}")
            self._drafts.pop(game_id, None)
            refreshed = self.refresh()
            return ScoreEditResult(
                success=False, error_message=str(e), warning=refreshed.warning
            )

        self._drafts.pop(game_id, None)
        refreshed = self.refresh()
        logger.info(f"Saved {game_id}: {a}-{b}")
        return ScoreEditResult(success=True, saved=True, warning=refreshed.warning)

    def reset(self) -> ScoreEditResult:
        """Clear every score in the ledger. Days 2 and 3 lock again."""
        if not self.can_edit:
            return ScoreEditResult(success=False, error_message=NOT_ALLOWED_MESSAGE)
        try:
            self.ledger.reset()
        except LedgerException as e:
            logger.warning(f"Could not reset scores: {e}")
            refreshed = self.refresh()
            return ScoreEditResult(
                success=False, error_message=str(e), warning=refreshed.warning
            )

        self._drafts.clear()
        refreshed = self.refresh()
        logger.info("All scores cleared")
        return ScoreEditResult(success=True, saved=True, warning=refreshed.warning)

