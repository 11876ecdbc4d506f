"""
Health API Router - liveness/readiness probes.

/Health           → always 200 while the process serves requests
/Health/detailed  → 200 with database status, 503 when unreachable
/Health/live      → 200, empty body
/Health/ready     → 200 or 503 depending on database reachability
"""

from datetime import datetime, timezone
from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from flowing_links.infrastructure.persistence import Database

logger = getLogger(__name__)

router = APIRouter(prefix="/Health", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("")
async def health():
    return {"status": "healthy", "timestamp": _now()}


@router.get("/detailed")
@inject
async def health_detailed(database: FromDishka[Database]):
    if not await database.ping():
        logger.warning("Health check: database connection failed")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "disconnected", "timestamp": _now()},
        )
    return {"status": "healthy", "database": "connected", "timestamp": _now()}


@router.get("/live")
async def health_live():
    return Response(status_code=status.HTTP_200_OK)


@router.get("/ready")
@inject
async def health_ready(database: FromDishka[Database]):
    if not await database.ping():
        return Response(status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return Response(status_code=status.HTTP_200_OK)
