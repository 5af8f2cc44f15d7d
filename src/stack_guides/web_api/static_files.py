"""Static file resolution for the docs directory.

``resolve_static`` is a pure request → response mapping so the FastAPI
route stays a thin adapter and the containment rules can be tested
without a server.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field
from pathlib import Path

_logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"
DEFAULT_MIME_TYPE = "text/plain"

MIME_TYPES: dict[str, str] = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}

_NOT_FOUND_PAGE = """<!DOCTYPE html>
<html>
  <head><title>404 Not Found</title></head>
  <body>
    <h1>404 - File Not Found</h1>
    <p>The file <code>{path}</code> was not found.</p>
    <p><a href="/">Go back to homepage</a></p>
  </body>
</html>
"""


@dataclass(frozen=True, slots=True)
class StaticResponse:
    status_code: int
    content: bytes
    media_type: str
    headers: dict[str, str] = field(default_factory=dict)


def mime_type_for(path: Path) -> str:
    return MIME_TYPES.get(path.suffix.lower(), DEFAULT_MIME_TYPE)


def _forbidden() -> StaticResponse:
    return StaticResponse(403, b"Forbidden", "text/plain")


def _not_found(request_path: str) -> StaticResponse:
    page = _NOT_FOUND_PAGE.format(path=html.escape(request_path))
    return StaticResponse(404, page.encode("utf-8"), "text/html")


def resolve_static(request_path: str, docs_root: Path) -> StaticResponse:
    """Map a URL path onto a file below *docs_root*.

    - ``""`` / ``"/"`` serve ``index.html``
    - anything resolving outside the root → 403
    - missing, non-regular or unreadable files → 404
    - otherwise 200 with the bytes and ``Cache-Control: no-cache``
    """
    relative = request_path.lstrip("/") or INDEX_FILE
    display_path = "/" + relative

    try:
        root = docs_root.resolve()
        candidate = (root / relative).resolve()
    except (OSError, ValueError):
        return _not_found(display_path)

    if not candidate.is_relative_to(root):
        _logger.warning("rejected path outside docs root: %s", request_path)
        return _forbidden()

    try:
        if not candidate.is_file():
            return _not_found(display_path)
        content = candidate.read_bytes()
    except (OSError, ValueError) as exc:
        _logger.error("error reading file %s: %s", candidate, exc)
        return _not_found(display_path)

    return StaticResponse(
        200,
        content,
        mime_type_for(candidate),
        {"Cache-Control": "no-cache"},
    )
