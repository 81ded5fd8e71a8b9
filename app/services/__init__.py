"""Service layer exports."""

from .draft_board import DraftBoardService
from .token_store import TokenStore

__all__ = [
    "DraftBoardService",
    "TokenStore",
]
