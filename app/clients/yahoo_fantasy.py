"""
Thin wrapper around the Yahoo Fantasy Sports v2 REST API.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

import httpx

from app.clients.yahoo_errors import UpstreamUnavailableError, YahooAPIError
from app.core.config import YahooSettings


class YahooFantasyClient:
    """Issue bearer-authenticated GETs against league resources."""

    BASE_URL = "https://fantasysports.yahooapis.com/fantasy/v2"

    def __init__(
        self,
        yahoo_settings: YahooSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._yahoo = yahoo_settings
        self._transport = transport

    @property
    def league_key(self) -> str:
        return self._yahoo.league_key

    def league_url(self, resource: str = "") -> str:
        """Return the URL of a sub-resource of the configured league."""
        path = f"{self.BASE_URL}/league/{self._yahoo.league_key}"
        if resource:
            path = f"{path}/{resource}"
        return path

    async def get_json(self, url: str, *, access_token: str) -> Any:
        """
        Fetch ``url`` and decode its JSON body.

        The body is read as text before the status check so error payloads
        reach the caller intact through ``YahooAPIError``.
        """
        headers = {"Authorization": f"Bearer {access_token}"}
        try:
            async with httpx.AsyncClient(
                timeout=self._yahoo.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.get(url, params={"format": "json"}, headers=headers)
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(f"Could not reach {url}") from exc

        text = response.text
        if not response.is_success:
            raise YahooAPIError(response.status_code, text)

        try:
            return json.loads(text)
        except ValueError as exc:
            raise UpstreamUnavailableError(f"Non-JSON body returned by {url}") from exc

    async def fetch_scoreboard(self, *, access_token: str, week: int | None = None) -> Any:
        """Return the league scoreboard payload, optionally for a given week."""
        resource = "scoreboard" if week is None else f"scoreboard;week={week}"
        return await self.get_json(self.league_url(resource), access_token=access_token)

    async def fetch_draft_results(self, *, access_token: str) -> Any:
        return await self.get_json(self.league_url("draftresults"), access_token=access_token)

    async def fetch_teams(self, *, access_token: str) -> Any:
        return await self.get_json(self.league_url("teams"), access_token=access_token)

    async def fetch_players(self, player_keys: Iterable[str], *, access_token: str) -> Any:
        """Look up league players by key; Yahoo accepts up to 25 keys per call."""
        keys = ",".join(player_keys)
        return await self.get_json(
            self.league_url(f"players;player_keys={keys}"), access_token=access_token
        )


__all__ = ["YahooFantasyClient"]
