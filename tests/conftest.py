"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import httpx
import pytest

from app.core.config import YahooSettings


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def yahoo_settings() -> YahooSettings:
    return YahooSettings(
        CLIENT_ID="client",
        CLIENT_SECRET="secret",
        REDIRECT_URI="https://relay.example.com/auth/callback",
        LEAGUE_KEY="nfl.l.12345",
    )


class RecordingUpstream:
    """``httpx.MockTransport`` handler that remembers every request it sees."""

    def __init__(self, responder) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def recording_upstream():
    return RecordingUpstream
