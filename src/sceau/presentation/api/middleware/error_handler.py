"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from sceau.domain.exceptions import SceauException
from sceau.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

status_code_map = {
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": 422,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "NO_SESSION": status.HTTP_401_UNAUTHORIZED,
    "INVALID_SESSION": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHORIZED": status.HTTP_403_FORBIDDEN,
    "SIGNATURE_REJECTED": status.HTTP_401_UNAUTHORIZED,
    "WALLET_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def sceau_exception_handler(request: Request, exc: SceauException) -> JSONResponse:
    """
    Handle Sceau domain exceptions.

    Converts domain exceptions to appropriate HTTP responses. Session
    failures tell the client to sign in again.
    """
    status_code = status_code_map.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    log = logger.error if status_code >= 500 else logger.info
    log(
        f"{request.method} {request.url.path} -> {status_code} {exc.code}: "
        f"{exc.message}"
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "reauthenticate": exc.requires_reauthentication,
        },
    )
