"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, render, static

__all__ = ["health", "render", "static"]
