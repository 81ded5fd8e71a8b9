"""Exceptions raised by the Yahoo client wrappers."""

from __future__ import annotations


class YahooAPIError(Exception):
    """Raised when a Yahoo resource endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Yahoo API responded with HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class UpstreamUnavailableError(Exception):
    """Raised when Yahoo cannot be reached or returns an unreadable body."""


__all__ = ["UpstreamUnavailableError", "YahooAPIError"]
