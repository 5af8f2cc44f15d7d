"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from pathlib import Path

from fastapi import APIRouter

from stack_guides import __version__
from stack_guides.web_api.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Ready once a snapshot has been built into the docs directory.
    """
    if not Path(settings.SNAPSHOT_PATH).is_file():
        return {"status": "not_ready", "reason": "snapshot missing"}
    return {"status": "ready"}
