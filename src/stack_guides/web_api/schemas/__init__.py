"""
API Schemas
===========
Pydantic models for request/response validation.
"""
from .render import RenderRequest, RenderResponse

__all__ = ["RenderRequest", "RenderResponse"]
