"""
Domain exceptions package.
"""

# Auth exceptions
from sceau.domain.exceptions.auth import (
    AuthenticationError,
    InvalidSessionError,
    NoSessionError,
    SessionDecodeError,
    SignatureRejectedError,
    UnauthorizedError,
    WalletUnavailableError,
)

# Base exceptions
from sceau.domain.exceptions.base import (
    EntityNotFoundError,
    SceauException,
    ValidationError,
)

__all__ = [
    # Base
    "SceauException",
    "EntityNotFoundError",
    "ValidationError",
    # Auth
    "AuthenticationError",
    "NoSessionError",
    "InvalidSessionError",
    "UnauthorizedError",
    "SignatureRejectedError",
    "WalletUnavailableError",
    "SessionDecodeError",
]
