"""
Factory functions to provide shared clients and services as FastAPI dependencies.
"""

from functools import lru_cache

from fastapi import Depends

from app.clients import YahooFantasyClient, YahooOAuthClient
from app.dependencies.config import get_app_settings
from app.services import DraftBoardService, TokenStore


@lru_cache()
def get_token_store() -> TokenStore:
    """Provide the process-wide token store."""
    return TokenStore()


@lru_cache()
def get_yahoo_oauth_client() -> YahooOAuthClient:
    """Create a singleton Yahoo OAuth client."""
    return YahooOAuthClient(get_app_settings().yahoo)


@lru_cache()
def get_fantasy_client() -> YahooFantasyClient:
    """Provide Yahoo Fantasy API client instance."""
    return YahooFantasyClient(get_app_settings().yahoo)


def get_draft_board_service(
    fantasy_client: YahooFantasyClient = Depends(get_fantasy_client),
) -> DraftBoardService:
    """Build a draft board service around the injected fantasy client."""
    return DraftBoardService(fantasy_client)


__all__ = [
    "get_draft_board_service",
    "get_fantasy_client",
    "get_token_store",
    "get_yahoo_oauth_client",
]
