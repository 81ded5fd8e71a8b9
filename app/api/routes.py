"""
FastAPI routes for the Yahoo fantasy relay.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, RedirectResponse

from app.clients import UpstreamUnavailableError, YahooAPIError
from app.dependencies import (
    get_draft_board_service,
    get_fantasy_client,
    get_token_store,
    get_yahoo_oauth_client,
)
from app.models.oauth import TokenDenied

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_AUTHENTICATED_MESSAGE = "Not authenticated. Visit /auth/start to sign in with Yahoo."


def _not_authenticated() -> JSONResponse:
    return JSONResponse(
        status_code=HTTPStatus.UNAUTHORIZED,
        content={"error": NOT_AUTHENTICATED_MESSAGE},
    )


def _yahoo_api_error(exc: YahooAPIError) -> JSONResponse:
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={"error": "Yahoo API error", "status": exc.status_code, "body": exc.body},
    )


@router.get("/api/hello", status_code=HTTPStatus.OK)
async def hello() -> dict:
    """Simple liveness endpoint for monitoring."""
    return {"msg": "API is working!"}


@router.get("/auth/start")
async def start_yahoo_oauth_flow(
    oauth_client: Annotated[Any, Depends(get_yahoo_oauth_client)],
) -> RedirectResponse:
    """Send the browser to the Yahoo consent screen."""
    return RedirectResponse(
        url=oauth_client.build_authorization_url(), status_code=HTTPStatus.FOUND
    )


@router.get("/auth/callback")
async def handle_yahoo_oauth_callback(
    oauth_client: Annotated[Any, Depends(get_yahoo_oauth_client)],
    token_store: Annotated[Any, Depends(get_token_store)],
    code: str | None = Query(
        default=None, description="Authorization code returned by Yahoo."
    ),
):
    """Exchange the authorization code, store the token, then go home."""
    if not code:
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content={"error": "Missing authorization code"},
        )

    try:
        result = await oauth_client.exchange_authorization_code(code)
    except UpstreamUnavailableError:
        logger.exception("Yahoo token exchange failed")
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"error": "Authentication failed"},
        )

    if isinstance(result, TokenDenied):
        logger.error(
            "Yahoo token endpoint returned an error: %s (%s)",
            result.payload.get("error"),
            result.payload.get("error_description"),
        )
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content={"error": "Token exchange failed", "details": result.payload},
        )

    token_store.set(result.access_token)
    logger.info("Stored Yahoo access token")
    return RedirectResponse(url="/", status_code=HTTPStatus.FOUND)


@router.get("/scoreboard")
async def get_scoreboard(
    fantasy_client: Annotated[Any, Depends(get_fantasy_client)],
    token_store: Annotated[Any, Depends(get_token_store)],
    week: int | None = Query(
        default=None, ge=1, description="Scoreboard week; defaults to the current week."
    ),
):
    """Proxy the league scoreboard for the signed-in user."""
    access_token = token_store.get()
    if not access_token:
        return _not_authenticated()

    try:
        payload = await fantasy_client.fetch_scoreboard(
            access_token=access_token, week=week
        )
    except YahooAPIError as exc:
        logger.error("Yahoo scoreboard request failed (%s): %s", exc.status_code, exc.body)
        return _yahoo_api_error(exc)
    except UpstreamUnavailableError:
        logger.exception("Failed to fetch scoreboard")
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch scoreboard"},
        )

    return JSONResponse(content=payload)


@router.get("/draftboard-data")
async def get_draft_board(
    service: Annotated[Any, Depends(get_draft_board_service)],
    token_store: Annotated[Any, Depends(get_token_store)],
):
    """Return the league draft grouped by round for the draft grid view."""
    access_token = token_store.get()
    if not access_token:
        return _not_authenticated()

    try:
        board = await service.load(access_token=access_token)
    except YahooAPIError as exc:
        logger.error("Yahoo draft request failed (%s): %s", exc.status_code, exc.body)
        return _yahoo_api_error(exc)
    except UpstreamUnavailableError:
        logger.exception("Failed to fetch draft board")
        return JSONResponse(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch draft board"},
        )

    return JSONResponse(content=board.model_dump(by_alias=True))


__all__ = ["router"]
