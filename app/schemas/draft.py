"""Schemas describing the draft-board payload served to the browser."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DraftPick(BaseModel):
    pick: int = Field(..., description="Overall pick number.")
    round: int
    team_key: Optional[str] = None
    player_key: str
    player_name: Optional[str] = None
    player_pos: Optional[str] = None
    player_team: Optional[str] = None
    is_keeper: bool = False


class DraftRound(BaseModel):
    round: int
    picks: List[DraftPick] = Field(default_factory=list)


class DraftBoardMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    max_round: int = Field(0, alias="maxRound")
    total_picks: int = Field(0, alias="totalPicks")


class TeamInfo(BaseModel):
    name: Optional[str] = None
    logo_url: Optional[str] = None


class DraftBoard(BaseModel):
    """Picks grouped by round, with team columns in draft order."""

    model_config = ConfigDict(populate_by_name=True)

    draft_order: List[str] = Field(default_factory=list, alias="draftOrder")
    rounds: List[DraftRound] = Field(default_factory=list)
    meta: DraftBoardMeta = Field(default_factory=DraftBoardMeta)
    teams: Dict[str, TeamInfo] = Field(default_factory=dict)


__all__ = ["DraftBoard", "DraftBoardMeta", "DraftPick", "DraftRound", "TeamInfo"]
