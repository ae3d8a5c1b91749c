"""Score service settings read from the environment.

Environment variables:
    SCORE_DB_PATH          SQLite file (default ``scores.db``)
    SCORE_API_TOKENS       ``token=user_id`` pairs, comma separated
    SCORE_ADMIN_USER_IDS   user ids allowed to edit, comma separated
    SCORE_HOST / SCORE_PORT  where ``bracket-schedule-server`` listens
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

import os
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional

from bracketschedule.constants import DEFAULT_DB_PATH
from bracketschedule.exceptions import InvalidConfigurationException

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def _split_list(value: Optional[str]) -> List[str]:
    return [item.strip() for item in (value or "").split(",") if item.strip()]


def parse_tokens(value: Optional[str]) -> Dict[str, str]:
    """Parse ``"tok1=alice,tok2=bob"`` into ``{"tok1": "alice", "tok2": "bob"}``.

    Raises:
        InvalidConfigurationException: If a pair has no ``=`` or an empty side
    """
    tokens: Dict[str, str] = {}
    for pair in _split_list(value):
        token, sep, user_id = pair.partition("=")
        token, user_id = token.strip(), user_id.strip()
        if not sep or not token or not user_id:
            raise InvalidConfigurationException(
                f"Bad SCORE_API_TOKENS entry {pair!r}, expected token=user_id"
            )
        tokens[token] = user_id
    return tokens


@dataclass
class ServerSettings:
    """Configuration of the score service.

    ``tokens`` stands in for the identity provider: it maps a bearer token to
    the user it identifies. ``admin_user_ids`` is the edit allowlist.
    """

    db_path: str = DEFAULT_DB_PATH
    tokens: Dict[str, str] = field(default_factory=dict)
    admin_user_ids: FrozenSet[str] = frozenset()
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        env = os.environ if environ is None else environ
        port = env.get("SCORE_PORT") or str(DEFAULT_PORT)
        try:
            port_number = int(port)
        except ValueError:
            raise InvalidConfigurationException(f"Bad SCORE_PORT: {port!r}") from None
        return cls(
            db_path=env.get("SCORE_DB_PATH") or DEFAULT_DB_PATH,
            tokens=parse_tokens(env.get("SCORE_API_TOKENS")),
            admin_user_ids=frozenset(_split_list(env.get("SCORE_ADMIN_USER_IDS"))),
            host=env.get("SCORE_HOST") or DEFAULT_HOST,
            port=port_number,
        )

    def user_for(self, token: Optional[str]) -> Optional[str]:
        """User id identified by a bearer token, or None."""
        if not token:
            return None
        return self.tokens.get(token)

    def is_editor(self, user_id: Optional[str]) -> bool:
        return user_id is not None and user_id in self.admin_user_ids
