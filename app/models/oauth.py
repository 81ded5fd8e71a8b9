"""
Domain models for the outcome of a Yahoo token exchange.
"""

from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, Field


class TokenGranted(BaseModel):
    """The token endpoint issued an access token."""

    kind: Literal["granted"] = "granted"
    access_token: str


class TokenDenied(BaseModel):
    """The token endpoint refused the exchange; ``payload`` is its raw body."""

    kind: Literal["denied"] = "denied"
    payload: Dict[str, Any] = Field(default_factory=dict)


TokenExchangeResult = Union[TokenGranted, TokenDenied]


def parse_token_response(payload: Any) -> TokenExchangeResult:
    """Classify a decoded token endpoint body exactly once."""
    if not isinstance(payload, dict):
        return TokenDenied(payload={"body": payload})
    if payload.get("error"):
        return TokenDenied(payload=payload)
    access_token = payload.get("access_token")
    if isinstance(access_token, str) and access_token:
        return TokenGranted(access_token=access_token)
    return TokenDenied(payload=payload)


__all__ = [
    "TokenDenied",
    "TokenExchangeResult",
    "TokenGranted",
    "parse_token_response",
]
