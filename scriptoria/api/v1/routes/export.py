from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from scriptoria.schemas.blueprint import ExportRequest
from scriptoria.services.export import EXPORT_FORMATS

router = APIRouter()


@router.post("/export-blueprint")
async def export_blueprint(payload: ExportRequest) -> Response:
    """
    Render a blueprint as a downloadable document.

    Request body:
    {
        "blueprint": {"story": "...", ...},
        "format": "markdown",  # markdown or text
        "title": "Optional document title"
    }
    """
    render, media_type, extension = EXPORT_FORMATS[payload.format]
    body = render(payload.blueprint, payload.title)
    return Response(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="scriptoria-blueprint.{extension}"'},
    )
