"""
Health Check Endpoints.

- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
"""

from typing import Any

from fastapi import APIRouter, HTTPException

from notebase.core.dependencies import DatabaseDep
from notebase.core.logging import get_logger
from notebase.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(database: DatabaseDep) -> dict[str, Any]:
    """
    Readiness check.

    Returns 200 when the database answers a trivial query, 503 otherwise.
    """
    start = utc_now()
    try:
        await database.ping()
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "checks": {"database": {"status": "unhealthy", "error": str(e)}},
                "timestamp": utc_now().isoformat(),
            },
        )

    latency_ms = int((utc_now() - start).total_seconds() * 1000)
    return {
        "status": "healthy",
        "checks": {"database": {"status": "healthy", "latency_ms": latency_ms}},
        "timestamp": utc_now().isoformat(),
    }
