"""
Catch-all route serving the browser bundle.

Registered after the API routes so it only sees paths nothing else matched.
"""

from __future__ import annotations

from http import HTTPStatus
from pathlib import Path
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, JSONResponse

from app.dependencies import get_app_settings

router = APIRouter()


def _lookup(root: Path, relative: str) -> Path | None:
    candidate = (root / relative).resolve()
    # Paths escaping the static root fall through to the index.
    if root not in candidate.parents:
        return None
    for option in (candidate, candidate.with_suffix(".html")):
        if option.is_file():
            return option
    return None


def resolve_asset(static_dir: Path, request_path: str) -> Path | None:
    """Map a request path to a file under ``static_dir``, or ``None``."""
    root = static_dir.resolve()
    relative = request_path.strip("/")
    if relative:
        try:
            asset = _lookup(root, relative)
        except (OSError, ValueError):
            # NUL bytes, over-long names and the like are treated as unmatched.
            asset = None
        if asset is not None:
            return asset
    index = root / "index.html"
    return index if index.is_file() else None


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(
    full_path: str,
    settings: Annotated[Any, Depends(get_app_settings)],
):
    """Serve a static asset, falling back to the index document."""
    asset = resolve_asset(Path(settings.static_dir), full_path)
    if asset is None:
        return JSONResponse(
            status_code=HTTPStatus.NOT_FOUND, content={"error": "Frontend not found"}
        )
    return FileResponse(asset)


__all__ = ["resolve_asset", "router"]
