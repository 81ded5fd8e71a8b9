"""Public schema exports."""

from .draft import DraftBoard, DraftBoardMeta, DraftPick, DraftRound, TeamInfo

__all__ = [
    "DraftBoard",
    "DraftBoardMeta",
    "DraftPick",
    "DraftRound",
    "TeamInfo",
]
