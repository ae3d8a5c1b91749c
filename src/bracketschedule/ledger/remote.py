"""Remote score ledger backed by the score service's HTTP API.

Usage:
    from bracketschedule.ledger.remote import HttpScoreLedger
    ledger = HttpScoreLedger("https://scores.example.org", token=access_token)
    snapshot = ledger.fetch()        # public read, canEdit from the token
    ledger.submit("D1G1", 10, 3)     # editors only
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

from typing import Any, Dict, Optional

import requests

from bracketschedule.constants import DEFAULT_HTTP_TIMEOUT, SCORES_ENDPOINT
from bracketschedule.exceptions import (
    LedgerUnavailableException,
    ScoreValidationException,
    UnauthorizedException,
)
from bracketschedule.ledger.base import ScoreLedger
from bracketschedule.models.score import LedgerSnapshot
from bracketschedule.utils import setup_logger

logger = setup_logger(__name__)


class HttpScoreLedger(ScoreLedger):
    """Score ledger reached over HTTP.

    Args:
        base_url: Root URL of the score service
        token: Bearer token identifying the caller, if logged in
        session: Optional ``requests.Session`` (injected in tests)
        timeout: Seconds to wait for each request
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        self.url = base_url.rstrip("/") + SCORES_ENDPOINT
        self.token = token or None
        self.session = session or requests.Session()
        self.timeout = timeout

    def set_token(self, token: Optional[str]) -> None:
        """Log in (or out, with None) for subsequent requests."""
        self.token = token or None

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _request(self, method: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            resp = self.session.request(
                method,
                self.url,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.warning("Score service unreachable: %s", e)
            raise LedgerUnavailableException(f"Score service unreachable: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = None
        message = None
        if isinstance(body, dict):
            message = body.get("error") or body.get("detail")
        if not isinstance(message, str):
            message = None

        if resp.status_code in (401, 403):
            raise UnauthorizedException(message or "Not allowed")
        if resp.status_code == 400:
            raise ScoreValidationException(message or "Invalid score")
        if resp.status_code >= 400:
            raise LedgerUnavailableException(
                message or f"Score service returned HTTP {resp.status_code}"
            )
        if not isinstance(body, dict):
            raise LedgerUnavailableException("Malformed score service response")
        return body

    def fetch(self) -> LedgerSnapshot:
        body = self._request("GET")
        if not isinstance(body.get("scores", {}), dict):
            raise LedgerUnavailableException("Malformed score service response")
        snapshot = LedgerSnapshot.from_payload(body)
        logger.debug(
            "Fetched %d scores (can_edit=%s)", len(snapshot.scores), snapshot.can_edit
        )
        return snapshot

    def submit(self, game_id: str, a: int, b: int) -> None:
        if not self.token:
            raise UnauthorizedException("Not logged in")
        self._request("POST", json={"gameId": game_id, "a": a, "b": b})
        logger.info("Submitted %s: %s-%s", game_id, a, b)

    def reset(self) -> None:
        if not self.token:
            raise UnauthorizedException("Not logged in")
        self._request("DELETE")
        logger.info("Remote score ledger cleared")

    def __repr__(self) -> str:
        return f"HttpScoreLedger({self.url!r}, logged_in={self.token is not None})"
