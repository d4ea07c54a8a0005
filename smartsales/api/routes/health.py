"""Health Probes — unauthenticated liveness and readiness.

Invariants:
    - /health/ answers 200 whenever the process serves requests
    - /health/ready answers 503 until the database answers SELECT 1
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

import smartsales.infrastructure.database as database
from smartsales import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "smartsales-api"


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": __version__}


@router.get("/ready")
async def readiness():
    manager = database.db_manager
    database_ok = manager is not None and await manager.health_check()
    checks = {"database": "healthy" if database_ok else "unavailable"}
    if database_ok:
        return {"status": "ready", "checks": checks}

    logger.warning("Readiness probe failed: database unavailable")
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "reason": "database_unavailable", "checks": checks},
    )
