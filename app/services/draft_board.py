"""
Assemble the draft-board grid payload from Yahoo league resources.

Yahoo encodes collections as ``{"0": {...}, "1": {...}, "count": N}`` and
entity metadata as lists of single-key dicts, so most of this module is
flattening those shapes into plain records.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

from app.clients.yahoo_fantasy import YahooFantasyClient
from app.schemas.draft import DraftBoard, DraftBoardMeta, DraftPick, DraftRound, TeamInfo

PLAYER_BATCH_SIZE = 25


def _league_sections(payload: Any) -> Dict[str, Any]:
    """Merge the sub-resource dicts that follow the league metadata entry."""
    content = payload.get("fantasy_content") if isinstance(payload, dict) else None
    league = content.get("league") if isinstance(content, dict) else None
    merged: Dict[str, Any] = {}
    if isinstance(league, list):
        for entry in league[1:]:
            if isinstance(entry, dict):
                merged.update(entry)
    return merged


def _collection(container: Any, item_key: str) -> Iterator[Any]:
    """Yield each ``item_key`` value from a Yahoo numbered collection."""
    if not isinstance(container, dict):
        return
    for key, value in container.items():
        if key == "count" or not isinstance(value, dict):
            continue
        if item_key in value:
            yield value[item_key]


def _flatten_meta(entity: Any) -> Dict[str, Any]:
    """Collapse Yahoo's list-of-dicts metadata block into a single dict."""
    block = entity[0] if isinstance(entity, list) and entity else entity
    flat: Dict[str, Any] = {}
    if isinstance(block, list):
        for item in block:
            if isinstance(item, dict):
                flat.update(item)
    elif isinstance(block, dict):
        flat.update(block)
    return flat


def _logo_url(team_logos: Any) -> Optional[str]:
    if isinstance(team_logos, list):
        for entry in team_logos:
            logo = entry.get("team_logo") if isinstance(entry, dict) else None
            if isinstance(logo, dict) and logo.get("url"):
                return logo["url"]
    return None


def parse_teams(payload: Any) -> Dict[str, Dict[str, Optional[str]]]:
    """Map team keys to display metadata."""
    teams: Dict[str, Dict[str, Optional[str]]] = {}
    for team in _collection(_league_sections(payload).get("teams"), "team"):
        meta = _flatten_meta(team)
        team_key = meta.get("team_key")
        if not team_key:
            continue
        teams[team_key] = {
            "name": meta.get("name"),
            "logo_url": _logo_url(meta.get("team_logos")),
        }
    return teams


def parse_draft_results(payload: Any) -> List[Dict[str, Any]]:
    """Return drafted picks ordered by overall pick number."""
    picks = []
    for result in _collection(_league_sections(payload).get("draft_results"), "draft_result"):
        if not isinstance(result, dict) or not result.get("player_key"):
            continue
        try:
            pick_number = int(result.get("pick"))
            round_number = int(result.get("round"))
        except (TypeError, ValueError):
            continue
        picks.append(
            {
                "pick": pick_number,
                "round": round_number,
                "team_key": result.get("team_key"),
                "player_key": result["player_key"],
            }
        )
    picks.sort(key=lambda pick: pick["pick"])
    return picks


def _is_keeper(value: Any) -> bool:
    if isinstance(value, dict):
        return bool(value.get("kept"))
    return bool(value)


def parse_players(payload: Any) -> Dict[str, Dict[str, Any]]:
    """Map player keys to name, position, NFL team and keeper flag."""
    players: Dict[str, Dict[str, Any]] = {}
    for player in _collection(_league_sections(payload).get("players"), "player"):
        meta = _flatten_meta(player)
        player_key = meta.get("player_key")
        if not player_key:
            continue
        name = meta.get("name")
        players[player_key] = {
            "player_name": name.get("full") if isinstance(name, dict) else name,
            "player_pos": meta.get("display_position"),
            "player_team": meta.get("editorial_team_abbr"),
            "is_keeper": _is_keeper(meta.get("is_keeper")),
        }
    return players


def draft_order(picks: Iterable[Dict[str, Any]]) -> List[str]:
    """Teams ordered by their first-round slot, then by first appearance."""
    ordered = sorted(picks, key=lambda pick: (pick["round"] != 1, pick["pick"]))
    seen: List[str] = []
    for pick in ordered:
        team_key = pick["team_key"]
        if team_key and team_key not in seen:
            seen.append(team_key)
    return seen


def build_draft_board(
    picks: List[Dict[str, Any]],
    teams: Dict[str, Dict[str, Optional[str]]],
    players: Dict[str, Dict[str, Any]],
) -> DraftBoard:
    """Combine parsed resources into the grid payload served to the browser."""
    rounds: Dict[int, List[DraftPick]] = {}
    for pick in picks:
        details = players.get(pick["player_key"], {})
        rounds.setdefault(pick["round"], []).append(DraftPick(**pick, **details))

    return DraftBoard(
        draft_order=draft_order(picks),
        rounds=[DraftRound(round=number, picks=rounds[number]) for number in sorted(rounds)],
        meta=DraftBoardMeta(
            max_round=max(rounds) if rounds else 0,
            total_picks=len(picks),
        ),
        teams={key: TeamInfo(**info) for key, info in teams.items()},
    )


class DraftBoardService:
    """Fetch draft results, teams and drafted players for the league."""

    def __init__(self, fantasy_client: YahooFantasyClient) -> None:
        self._client = fantasy_client

    async def load(self, *, access_token: str) -> DraftBoard:
        picks = parse_draft_results(
            await self._client.fetch_draft_results(access_token=access_token)
        )
        teams = parse_teams(await self._client.fetch_teams(access_token=access_token))

        players: Dict[str, Dict[str, Any]] = {}
        player_keys = [pick["player_key"] for pick in picks]
        for start in range(0, len(player_keys), PLAYER_BATCH_SIZE):
            batch = player_keys[start : start + PLAYER_BATCH_SIZE]
            players.update(
                parse_players(
                    await self._client.fetch_players(batch, access_token=access_token)
                )
            )

        return build_draft_board(picks, teams, players)


__all__ = [
    "DraftBoardService",
    "build_draft_board",
    "draft_order",
    "parse_draft_results",
    "parse_players",
    "parse_teams",
]
