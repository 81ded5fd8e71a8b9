"""
Yahoo OAuth utilities.

These helpers drive the authorization-code flow: building the consent URL
and exchanging the returned code for an access token.
"""

from __future__ import annotations

import base64
import json
from urllib.parse import urlencode

import httpx

from app.clients.yahoo_errors import UpstreamUnavailableError
from app.core.config import YahooSettings
from app.models.oauth import TokenExchangeResult, parse_token_response


class YahooOAuthClient:
    """Build Yahoo authorization URLs and exchange authorization codes."""

    AUTH_BASE_URL = "https://api.login.yahoo.com/oauth2/request_auth"
    TOKEN_URL = "https://api.login.yahoo.com/oauth2/get_token"

    def __init__(
        self,
        yahoo_settings: YahooSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._yahoo = yahoo_settings
        self._transport = transport

    def build_authorization_url(self) -> str:
        """Construct the Yahoo consent URL; depends only on configuration."""
        params = {
            "client_id": self._yahoo.client_id,
            "redirect_uri": self._yahoo.redirect_uri,
            "response_type": "code",
            "language": "en-us",
        }
        return f"{self.AUTH_BASE_URL}?{urlencode(params)}"

    def _basic_auth_header(self) -> str:
        raw = f"{self._yahoo.client_id}:{self._yahoo.client_secret}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    async def exchange_authorization_code(self, code: str) -> TokenExchangeResult:
        """
        Exchange an authorization code for an access token.

        The body is classified regardless of HTTP status because Yahoo reports
        grant failures as JSON ``error`` payloads.
        """
        payload = {
            "grant_type": "authorization_code",
            "redirect_uri": self._yahoo.redirect_uri,
            "code": code,
        }
        headers = {"Authorization": self._basic_auth_header()}

        try:
            async with httpx.AsyncClient(
                timeout=self._yahoo.timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(self.TOKEN_URL, data=payload, headers=headers)
            token_payload = json.loads(response.text)
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailableError("Yahoo token endpoint unavailable.") from exc

        return parse_token_response(token_payload)


__all__ = ["YahooOAuthClient"]
