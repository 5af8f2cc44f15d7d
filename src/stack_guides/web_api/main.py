"""
FastAPI Application
==================
Serves the guides UI, its snapshot file, and on-demand rendering.

Run with:
    uvicorn stack_guides.web_api.main:app --reload
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stack_guides import __version__
from stack_guides.web_api.config import settings
from stack_guides.web_api.routers import health, render, static

# Create application
app = FastAPI(
    title="Stack Guides",
    description="Coding guidelines per technology stack",
    version=__version__,
    docs_url="/docs-api" if settings.DEBUG else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers; the static catch-all must stay last
app.include_router(health.router, tags=["Health"])
app.include_router(render.router, prefix="/api", tags=["Render"])
app.include_router(static.router, tags=["Static"])


def run(host: str | None = None, port: int | None = None) -> None:
    """Serve the app with uvicorn until the process exits."""
    import uvicorn

    uvicorn.run(app, host=host or settings.HOST, port=port or settings.PORT)


# For running directly: python -m stack_guides.web_api.main
if __name__ == "__main__":
    run()
