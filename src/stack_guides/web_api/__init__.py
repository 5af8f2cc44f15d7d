"""
Stack Guides Web API
====================
FastAPI app serving the docs directory and rendered guides.

Quick Start:
    uvicorn stack_guides.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
