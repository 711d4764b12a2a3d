"""
API middleware for Sceau.
"""

from sceau.presentation.api.middleware.error_handler import (
    sceau_exception_handler,
)
from sceau.presentation.api.middleware.metrics_middleware import MetricsMiddleware
from sceau.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)
from sceau.presentation.api.middleware.session import get_current_session

__all__ = [
    "sceau_exception_handler",
    "MetricsMiddleware",
    "RequestIDMiddleware",
    "get_current_session",
]
