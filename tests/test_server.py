"""
Score service endpoint tests.

Uses FastAPI's TestClient, no server process needed.
"""

import pytest
from fastapi.testclient import TestClient

from bracketschedule.constants import DAY_1, DAY_2
from bracketschedule.controllers import ScheduleController
from bracketschedule.exceptions import (
    InvalidConfigurationException,
    LedgerUnavailableException,
)
from bracketschedule.ledger import HttpScoreLedger
from bracketschedule.server import ScoreStore, ServerSettings, create_app
from bracketschedule.server.app import bearer_token
from bracketschedule.server.settings import parse_tokens

ADMIN = {"Authorization": "Bearer admin-token"}
VIEWER = {"Authorization": "Bearer viewer-token"}


@pytest.fixture
def store():
    """Fresh in-memory store for each test."""
    return ScoreStore(":memory:")


@pytest.fixture
def settings():
    return ServerSettings(
        tokens={"admin-token": "alice", "viewer-token": "bob"},
        admin_user_ids=frozenset({"alice"}),
    )


@pytest.fixture
def client(store, settings):
    with TestClient(create_app(store, settings)) as c:
        yield c


# ======================================================================
# Reading
# ======================================================================


def test_anonymous_read(client):
    resp = client.get("/api/scores")
    assert resp.status_code == 200
    assert resp.json() == {"scores": {}, "canEdit": False}


@pytest.mark.parametrize(
    "headers, can_edit",
    [(ADMIN, True), (VIEWER, False), ({"Authorization": "Bearer nope"}, False)],
)
def test_can_edit_follows_allowlist(client, headers, can_edit):
    assert client.get("/api/scores", headers=headers).json()["canEdit"] is can_edit


def test_health(client, store):
    store.upsert("D1G1", 3, 1)
    data = client.get("/health").json()
    assert data["status"] == "ok"
    assert data["games_scored"] == 1


# ======================================================================
# Writing
# ======================================================================


@pytest.mark.parametrize(
    "headers, status, detail",
    [
        ({}, 401, "Missing token"),
        ({"Authorization": "Basic abc"}, 401, "Missing token"),
        ({"Authorization": "Bearer nope"}, 401, "Invalid token"),
        (VIEWER, 403, "Not allowed"),
    ],
)
def test_post_requires_an_editor(client, headers, status, detail):
    resp = client.post("/api/scores", json={"gameId": "D1G1", "a": 1, "b": 0}, headers=headers)
    assert resp.status_code == status
    assert resp.json()["detail"] == detail


@pytest.mark.parametrize(
    "body, detail",
    [
        ({"a": 1, "b": 0}, "Missing gameId"),
        ({"gameId": "D7G1", "a": 1, "b": 0}, "Unknown gameId"),
        ({"gameId": "D1G1", "a": "1", "b": 0}, "Scores must be numbers"),
        ({"gameId": "D1G1", "a": True, "b": 0}, "Scores must be numbers"),
        ({"gameId": "D1G1", "a": 1}, "Scores must be numbers"),
        ({"gameId": "D1G1", "a": -1, "b": 0}, "Scores must be non-negative integers"),
        ({"gameId": "D1G1", "a": 4, "b": 4}, "No ties allowed"),
        (
            {"gameId": "D1G1", "a": 10**20, "b": 1},
            "Scores must be at most 9223372036854775807",
        ),
    ],
)
def test_post_validates_scores(client, store, body, detail):
    resp = client.post("/api/scores", json=body, headers=ADMIN)
    assert resp.status_code == 400
    assert resp.json()["detail"] == detail
    assert store.all_scores() == {}


def test_store_failure_is_reported_as_unavailable(client, store):
    with pytest.raises(LedgerUnavailableException):
        store.upsert("D1G1", 2**64, 1)

    store.close()
    resp = client.post("/api/scores", json={"gameId": "D1G1", "a": 10, "b": 3}, headers=ADMIN)
    assert resp.status_code == 503
    assert "D1G1" in resp.json()["detail"]


def test_post_upserts(client):
    client.post("/api/scores", json={"gameId": "D1G1", "a": 10, "b": 3}, headers=ADMIN)
    resp = client.post("/api/scores", json={"gameId": "D1G1", "a": 10, "b": 12}, headers=ADMIN)
    assert resp.json() == {"ok": True, "cleared": None}

    scores = client.get("/api/scores").json()["scores"]
    assert scores == {"D1G1": {"a": 10, "b": 12}}


def test_delete_clears_for_editors_only(client, store):
    store.upsert("D1G1", 3, 1)
    store.upsert("D1G2", 3, 1)

    assert client.delete("/api/scores", headers=VIEWER).status_code == 403
    resp = client.delete("/api/scores", headers=ADMIN)
    assert resp.json()["cleared"] == 2
    assert store.all_scores() == {}


def test_remote_ledger_against_service(client, bracket):
    """The controller drives the real service through the HTTP ledger."""
    ledger = HttpScoreLedger("http://testserver", token="admin-token", session=client)
    controller = ScheduleController(bracket, ledger)
    assert controller.refresh().success
    assert controller.can_edit

    for game in bracket.day_games(DAY_1):
        assert controller.submit_score(game.id, 2, 1).saved
    assert controller.day_gate.open_days == [DAY_1, DAY_2]
    assert controller.teams_for(bracket.get("D2G1")) == ("Team 1", "Team 3")

    tie = controller.enter_score("D2G1", "a", "3")
    assert tie.success
    tie = controller.enter_score("D2G1", "b", "3")
    assert tie.error_message == "No ties allowed"

    assert controller.reset().saved
    assert controller.day_gate.is_locked(DAY_2)


def test_viewer_token_cannot_write_through_ledger(client, bracket):
    ledger = HttpScoreLedger("http://testserver", token="viewer-token", session=client)
    controller = ScheduleController(bracket, ledger)
    controller.refresh()
    assert not controller.can_edit
    assert controller.submit_score("D1G1", 2, 1).error_message == "Not allowed"


# ======================================================================
# Settings
# ======================================================================


def test_bearer_token_parsing():
    assert bearer_token("Bearer abc") == "abc"
    assert bearer_token("bearer  abc ") == "abc"
    assert bearer_token("Bearer ") is None
    assert bearer_token(None) is None
    assert bearer_token("Token abc") is None


def test_settings_from_env():
    settings = ServerSettings.from_env(
        {
            "SCORE_DB_PATH": "/tmp/s.db",
            "SCORE_API_TOKENS": "t1=alice, t2 = bob",
            "SCORE_ADMIN_USER_IDS": "alice, carol",
            "SCORE_PORT": "9001",
        }
    )
    assert settings.db_path == "/tmp/s.db"
    assert settings.user_for("t2") == "bob"
    assert settings.is_editor("alice")
    assert not settings.is_editor(settings.user_for("t2"))
    assert not settings.is_editor(None)
    assert settings.port == 9001


def test_settings_defaults_and_errors():
    settings = ServerSettings.from_env({})
    assert settings.db_path == "scores.db"
    assert settings.tokens == {}
    assert settings.admin_user_ids == frozenset()

    with pytest.raises(InvalidConfigurationException):
        parse_tokens("justatoken")
    with pytest.raises(InvalidConfigurationException):
        ServerSettings.from_env({"SCORE_PORT": "eighty"})
