"""FastAPI score service.

Endpoints:
    GET    /api/scores   Current scores and whether the caller may edit them
    POST   /api/scores   Record one game's final score (editors only)
    DELETE /api/scores   Clear every score (editors only)
    GET    /health       Service health check

Editors are callers whose bearer token maps to a user id on the
SCORE_ADMIN_USER_IDS allowlist.
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

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from bracketschedule import APP_NAME, APP_VERSION
from bracketschedule.constants import ALL_GAME_IDS, SCORES_ENDPOINT
from bracketschedule.exceptions import LedgerUnavailableException
from bracketschedule.server.settings import ServerSettings
from bracketschedule.server.store import ScoreStore
from bracketschedule.utils import setup_logger
from bracketschedule.utils.validation import (
    MISSING_GAME_MESSAGE,
    NOT_A_NUMBER_MESSAGE,
    validate_score_pair,
)

logger = setup_logger(__name__)

MISSING_TOKEN_MESSAGE = "Missing token"
INVALID_TOKEN_MESSAGE = "Invalid token"
NOT_ALLOWED_MESSAGE = "Not allowed"
UNKNOWN_GAME_MESSAGE = "Unknown gameId"


# ======================================================================
# Request/Response Models
# ======================================================================


class ScoreSubmission(BaseModel):
    gameId: Optional[str] = None
    a: Any = None
    b: Any = None


class ScoresResponse(BaseModel):
    scores: Dict[str, Dict[str, int]]
    canEdit: bool


class OkResponse(BaseModel):
    ok: bool
    cleared: Optional[int] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    games_scored: int


# ======================================================================
# Auth
# ======================================================================


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def _require_editor(settings: ServerSettings, authorization: Optional[str]) -> str:
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=401, detail=MISSING_TOKEN_MESSAGE)
    user_id = settings.user_for(token)
    if user_id is None:
        raise HTTPException(status_code=401, detail=INVALID_TOKEN_MESSAGE)
    if not settings.is_editor(user_id):
        logger.warning(f"User {user_id} tried to edit scores without permission")
        raise HTTPException(status_code=403, detail=NOT_ALLOWED_MESSAGE)
    return user_id


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ======================================================================
# App
# ======================================================================


def create_app(
    store: Optional[ScoreStore] = None, settings: Optional[ServerSettings] = None
) -> FastAPI:
    """Build the score service.

    Args:
        store: Score storage; opened from ``settings.db_path`` when omitted
        settings: Service settings; read from the environment when omitted
    """
    settings = settings or ServerSettings.from_env()
    owns_store = store is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"{APP_NAME} score service starting: {len(settings.tokens)} tokens, "
            f"{len(settings.admin_user_ids)} editors"
        )
        if not settings.admin_user_ids:
            logger.warning("SCORE_ADMIN_USER_IDS is empty, nobody can edit scores")
        yield
        if owns_store:
            app.state.store.close()

    app = FastAPI(title=f"{APP_NAME} Scores", version=APP_VERSION, lifespan=lifespan)
    app.state.store = store or ScoreStore(settings.db_path)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get(SCORES_ENDPOINT, response_model=ScoresResponse)
    def get_scores(
        request: Request, authorization: Optional[str] = Header(None)
    ) -> Dict[str, Any]:
        """Public read. ``canEdit`` is true only for allowlisted callers."""
        user_id = settings.user_for(bearer_token(authorization))
        return {
            "scores": request.app.state.store.all_scores(),
            "canEdit": settings.is_editor(user_id),
        }

    @app.post(SCORES_ENDPOINT, response_model=OkResponse)
    def post_score(
        req: ScoreSubmission,
        request: Request,
        authorization: Optional[str] = Header(None),
    ) -> Dict[str, Any]:
        user_id = _require_editor(settings, authorization)

        if not req.gameId:
            raise HTTPException(status_code=400, detail=MISSING_GAME_MESSAGE)
        if req.gameId not in ALL_GAME_IDS:
            raise HTTPException(status_code=400, detail=UNKNOWN_GAME_MESSAGE)
        if not (_is_number(req.a) and _is_number(req.b)):
            raise HTTPException(status_code=400, detail=NOT_A_NUMBER_MESSAGE)
        result = validate_score_pair(req.a, req.b)
        if not result:
            raise HTTPException(status_code=400, detail=result.error_message)

        a, b = result.sanitized_value
        try:
            request.app.state.store.upsert(req.gameId, a, b)
        except LedgerUnavailableException as e:
            logger.error(f"Could not record {req.gameId}: {e}")
            raise HTTPException(status_code=503, detail=str(e)) from e
        logger.info(f"{user_id} recorded {req.gameId}: {a}-{b}")
        return {"ok": True}

    @app.delete(SCORES_ENDPOINT, response_model=OkResponse)
    def delete_scores(
        request: Request, authorization: Optional[str] = Header(None)
    ) -> Dict[str, Any]:
        user_id = _require_editor(settings, authorization)
        cleared = request.app.state.store.clear()
        logger.info(f"{user_id} cleared {cleared} scores")
        return {"ok": True, "cleared": cleared}

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request) -> Dict[str, Any]:
        return {
            "status": "ok",
            "version": APP_VERSION,
            "games_scored": len(request.app.state.store.all_scores()),
        }

    return app


def main() -> None:
    """Run the score service with uvicorn (``bracket-schedule-server``)."""
    import uvicorn

    settings = ServerSettings.from_env()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
