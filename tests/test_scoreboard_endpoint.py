try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import logging

import httpx
import pytest

from app.clients import YahooFantasyClient, YahooOAuthClient
from app.main import app
from app.services import TokenStore

pytestmark = pytest.mark.anyio

SCOREBOARD = {
    "fantasy_content": {
        "league": [
            {"league_key": "nfl.l.12345", "current_week": 7},
            {"scoreboard": {"week": 7, "0": {"matchups": {"count": 0}}}},
        ]
    }
}


@pytest.fixture()
def relay(yahoo_settings, recording_upstream):
    from app import dependencies

    state = {"scoreboard": httpx.Response(200, json=SCOREBOARD)}

    def respond(request: httpx.Request) -> httpx.Response:
        if request.url.host == "api.login.yahoo.com":
            return httpx.Response(200, json={"access_token": "fresh-token"})
        result = state["scoreboard"]
        if isinstance(result, Exception):
            raise result
        return result

    upstream = recording_upstream(respond)
    store = TokenStore()
    fantasy_client = YahooFantasyClient(yahoo_settings, transport=upstream.transport)
    oauth_client = YahooOAuthClient(yahoo_settings, transport=upstream.transport)

    app.dependency_overrides.update(
        {
            dependencies.get_fantasy_client: lambda: fantasy_client,
            dependencies.get_yahoo_oauth_client: lambda: oauth_client,
            dependencies.get_token_store: lambda: store,
        }
    )

    yield upstream, store, state

    app.dependency_overrides.clear()


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://testserver"
    )


async def test_scoreboard_requires_token_and_skips_upstream(relay):
    upstream, _, _ = relay

    async with _client() as client:
        first = await client.get("/scoreboard")
        second = await client.get("/scoreboard", params={"week": 3})

    for response in (first, second):
        assert response.status_code == 401
        assert response.json()["error"].startswith("Not authenticated")
    assert len(upstream.requests) == 0


async def test_scoreboard_forwards_payload_verbatim(relay):
    upstream, store, _ = relay
    store.set("stored-token")

    async with _client() as client:
        response = await client.get("/scoreboard")

    assert response.status_code == 200
    assert response.json() == SCOREBOARD

    request = upstream.requests[-1]
    assert request.method == "GET"
    assert request.headers["authorization"] == "Bearer stored-token"
    assert request.url.path == "/fantasy/v2/league/nfl.l.12345/scoreboard"
    assert request.url.params["format"] == "json"


async def test_scoreboard_uses_token_from_latest_exchange(relay):
    upstream, store, _ = relay

    async with _client() as client:
        callback = await client.get("/auth/callback", params={"code": "abc"})
        response = await client.get("/scoreboard")

    assert callback.status_code == 302
    assert store.get() == "fresh-token"
    assert response.status_code == 200
    assert upstream.requests[-1].headers["authorization"] == "Bearer fresh-token"


async def test_scoreboard_for_specific_week(relay):
    upstream, store, _ = relay
    store.set("stored-token")

    async with _client() as client:
        response = await client.get("/scoreboard", params={"week": 5})

    assert response.status_code == 200
    assert upstream.requests[-1].url.path == (
        "/fantasy/v2/league/nfl.l.12345/scoreboard;week=5"
    )


async def test_scoreboard_rejects_non_positive_week(relay):
    upstream, store, _ = relay
    store.set("stored-token")

    async with _client() as client:
        response = await client.get("/scoreboard", params={"week": 0})

    assert response.status_code == 422
    assert upstream.requests == []


async def test_scoreboard_upstream_error_is_reported_with_raw_body(relay):
    _, store, state = relay
    store.set("stored-token")
    state["scoreboard"] = httpx.Response(503, text="rate limited")

    async with _client() as client:
        response = await client.get("/scoreboard")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Yahoo API error",
        "status": 503,
        "body": "rate limited",
    }


async def test_scoreboard_upstream_401_is_not_special_cased(relay):
    _, store, state = relay
    store.set("expired-token")
    state["scoreboard"] = httpx.Response(401, json={"error": {"description": "expired"}})

    async with _client() as client:
        response = await client.get("/scoreboard")

    assert response.status_code == 500
    assert response.json()["status"] == 401
    assert store.get() == "expired-token"


async def test_scoreboard_network_failure_hides_cause(relay):
    _, store, state = relay
    store.set("stored-token")
    state["scoreboard"] = httpx.ConnectTimeout("upstream hung")

    async with _client() as client:
        response = await client.get("/scoreboard")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch scoreboard"}


async def test_scoreboard_malformed_success_body(relay):
    _, store, state = relay
    store.set("stored-token")
    state["scoreboard"] = httpx.Response(200, text="not json")

    async with _client() as client:
        response = await client.get("/scoreboard")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch scoreboard"}


async def test_scoreboard_failures_are_logged_server_side(relay, caplog):
    _, store, state = relay
    store.set("stored-token")

    with caplog.at_level(logging.ERROR, logger="app.api.routes"):
        state["scoreboard"] = httpx.ConnectError("socket closed by fantasysports host")
        async with _client() as client:
            unreachable = await client.get("/scoreboard")
        state["scoreboard"] = httpx.Response(503, text="rate limited")
        async with _client() as client:
            rejected = await client.get("/scoreboard")

    assert unreachable.status_code == 500
    assert "socket closed" not in unreachable.text
    assert rejected.status_code == 500

    records = [r for r in caplog.records if r.name == "app.api.routes"]
    assert len(records) == 2
    assert isinstance(records[0].exc_info[1].__cause__, httpx.ConnectError)
    assert "503" in records[1].getMessage()
    assert "rate limited" in records[1].getMessage()
    assert "stored-token" not in caplog.text


async def test_hello_endpoint():
    async with _client() as client:
        response = await client.get("/api/hello")

    assert response.status_code == 200
    assert response.json() == {"msg": "API is working!"}
