"""
Static Router
=============
Serves the UI assets and the snapshot file from the docs directory.
"""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import Response

from stack_guides.web_api.config import settings
from stack_guides.web_api.static_files import resolve_static

router = APIRouter()


@router.get("/{path:path}")
async def serve_static(path: str):
    """
    Serve a file below DOCS_DIR; ``/`` maps to ``index.html``.
    """
    result = resolve_static(path, Path(settings.DOCS_DIR))
    return Response(
        content=result.content,
        status_code=result.status_code,
        media_type=result.media_type,
        headers=result.headers,
    )
