"""Expose dependency helpers for FastAPI routers."""

from .clients import (
    get_draft_board_service,
    get_fantasy_client,
    get_token_store,
    get_yahoo_oauth_client,
)
from .config import get_app_settings

__all__ = [
    "get_app_settings",
    "get_draft_board_service",
    "get_fantasy_client",
    "get_token_store",
    "get_yahoo_oauth_client",
]
