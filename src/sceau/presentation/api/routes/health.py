"""
Health check API routes.
"""

from fastapi import APIRouter, Response, status

from sceau import __version__
from sceau.di.container import get_container

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(response: Response):
    """
    Readiness check.

    Returns 200 if the database answers, 503 otherwise.
    """
    db_healthy = await get_container().database.health_check()

    if not db_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if db_healthy else "degraded",
        "version": __version__,
        "components": {
            "database": {"status": "healthy" if db_healthy else "unhealthy"},
        },
    }
