"""
Render Schemas
==============
Request and response models for markdown rendering endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field


class RenderRequest(BaseModel):
    """Request to render a markdown body"""

    markdown: str = Field(..., description="Guide body in markdown")
    escape_html: bool = Field(
        default=False,
        description="Escape all text, not only fenced code blocks",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "markdown": "# Title\n\nSome **bold** text.",
                "escape_html": False,
            }
        }
    )


class RenderResponse(BaseModel):
    """Rendered HTML fragment"""

    html: str = Field(..., description="HTML fragment")
