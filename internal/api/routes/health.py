"""Health check API routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..dependencies import get_deps
from ..type import Dependencies

router = APIRouter()

HEALTHY = "healthy"
UNHEALTHY = "unhealthy"
IN_MEMORY = "in-memory"


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Basic health check endpoint."""
    return {"status": HEALTHY}


@router.get("/health/detailed")
async def detailed_health_check(deps: Dependencies = Depends(get_deps)) -> Dict[str, Any]:
    """Detailed health check with dependency status.

    The service is unhealthy when the configured database or cache does not
    answer; running on in-memory stores counts as healthy.
    """
    if deps.db is None:
        database = IN_MEMORY
    else:
        database = HEALTHY if await deps.db.health_check() else UNHEALTHY
    cache = HEALTHY if await deps.cache.health_check() else UNHEALTHY

    overall = UNHEALTHY if UNHEALTHY in (database, cache) else HEALTHY
    return {
        "status": overall,
        "version": deps.version,
        "service": deps.service_name,
        "dependencies": {
            "database": database,
            "cache": cache,
        },
        "index": deps.index.status().to_dict(),
        "scheduler": deps.scheduler.status() if deps.scheduler else {"running": False},
    }
