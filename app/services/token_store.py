"""
In-memory holder for the single Yahoo access token.
"""

from __future__ import annotations

from typing import Optional


class TokenStore:
    """Holds at most one bearer token for the lifetime of the process.

    Writes replace the value wholesale, so concurrent callbacks resolve as
    last-writer-wins. Nothing is persisted and there is no expiry tracking.
    """

    def __init__(self) -> None:
        self._token: Optional[str] = None

    def set(self, token: str) -> None:
        self._token = token

    def get(self) -> Optional[str]:
        return self._token


__all__ = ["TokenStore"]
