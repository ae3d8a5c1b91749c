"""An abstract base class for the score ledger collaborator."""

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

from __future__ import annotations

from abc import ABC, abstractmethod

from bracketschedule.models.score import LedgerSnapshot


class ScoreLedger(ABC):
    """
    Abstract interface to wherever submitted scores are kept.

    The engine never owns scores: it reads a snapshot through ``fetch`` and
    writes single results through ``submit``. Implementations decide where
    the scores live and who may change them.

    Notes
    -----
    - ``submit`` must refuse callers without write access by raising
      ``UnauthorizedException``.
    - ``submit`` must also refuse negative, non-integer or tied scores with
      ``ScoreValidationException``, even though callers validate first.
    - Any failure to reach the underlying store is reported as
      ``LedgerUnavailableException``.

    Examples
    --------
    Swapping the local ledger for the remote one::

        ledger = HttpScoreLedger("https://example.org", token=token)
        controller = ScheduleController(bracket, ledger)
    """

    @abstractmethod
    def fetch(self) -> LedgerSnapshot:
        """Return the current scores and whether the caller may edit them."""

    @abstractmethod
    def submit(self, game_id: str, a: int, b: int) -> None:
        """Record the final score of one game, replacing any previous one."""

    @abstractmethod
    def reset(self) -> None:
        """Remove every recorded score."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
