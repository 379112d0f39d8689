"""
Routes for serving the HTML views.
"""
from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

PAGES_DIR = Path(__file__).resolve().parent.parent / "static" / "pages"

router = APIRouter()


def _page(name: str) -> FileResponse:
    html_path = PAGES_DIR / name
    if not html_path.exists():
        raise HTTPException(status_code=404, detail=f"Page not found: {name}")
    return FileResponse(html_path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def landing_page():
    """Landing page with the two entry points."""
    return _page("index.html")


@router.get("/generate", include_in_schema=False)
async def generate_page():
    return _page("generate.html")


@router.get("/continue", include_in_schema=False)
async def continue_page():
    return _page("continue.html")
