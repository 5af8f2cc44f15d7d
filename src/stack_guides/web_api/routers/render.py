"""
Render Router
=============
On-demand HTML rendering of guide bodies and stack overviews.
"""
from fastapi import APIRouter, HTTPException

from stack_guides import api as core_api
from stack_guides.core.markdown import render_markdown
from stack_guides.model.snapshot import Snapshot
from stack_guides.web_api.config import settings
from stack_guides.web_api.schemas.render import RenderRequest, RenderResponse

router = APIRouter()


def _load_snapshot() -> Snapshot:
    try:
        return core_api.load_snapshot(settings.SNAPSHOT_PATH)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail="Snapshot not built")


@router.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest):
    """
    Render a markdown body to an HTML fragment.

    - **markdown**: body text (frontmatter already removed)
    - **escape_html**: escape text outside code blocks too
    """
    return RenderResponse(html=render_markdown(request.markdown, escape_html=request.escape_html))


# Plain ``def``: snapshot loading is blocking file I/O, run in the threadpool.
@router.get("/stacks/{stack_id}/guides/{guide_id}/html", response_model=RenderResponse)
def render_guide(
    stack_id: str,
    guide_id: str,
    escape_html: bool = False,
    with_header: bool = False,
):
    """
    Render one guide from the built snapshot.

    - **with_header**: prepend description, auto-apply note and globs
    """
    html = core_api.render_guide(
        _load_snapshot(),
        stack_id,
        guide_id,
        escape_html=escape_html,
        with_header=with_header,
    )
    if html is None:
        raise HTTPException(
            status_code=404, detail=f"Guide not found: {stack_id}/{guide_id}"
        )
    return RenderResponse(html=html)


@router.get("/stacks/{stack_id}/readme/html", response_model=RenderResponse)
def render_stack_readme(stack_id: str, escape_html: bool = False):
    """
    Render a stack's README overview; empty when the stack has none.
    """
    html = core_api.render_stack_readme(
        _load_snapshot(), stack_id, escape_html=escape_html
    )
    if html is None:
        raise HTTPException(status_code=404, detail=f"Stack not found: {stack_id}")
    return RenderResponse(html=html)
