"""
Monitoring infrastructure: logging and metrics.
"""

from sceau.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    mask_address,
    set_request_id,
    setup_logging,
)

__all__ = [
    "get_logger",
    "get_request_id",
    "mask_address",
    "set_request_id",
    "setup_logging",
]
