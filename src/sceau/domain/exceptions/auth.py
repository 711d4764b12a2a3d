"""
Authentication and authorization domain exceptions.

Callers treat NoSessionError and InvalidSessionError the same way
(prompt the user to sign in again). UnauthorizedError is a permission
failure: signing in again with the same wallet cannot fix it.
"""

from sceau.domain.exceptions.base import SceauException


class AuthenticationError(SceauException):
    """
    Raised when the wallet sign step fails or is rejected.

    Attributes:
        reason: Human-readable reason shown to the user
        rejected: True when the user declined the signature request
    """

    def __init__(self, reason: str = "Authentication failed", rejected: bool = False):
        self.reason = reason
        self.rejected = rejected
        super().__init__(reason, code="AUTHENTICATION_ERROR")


class NoSessionError(SceauException):
    """Raised when a privileged operation receives no session."""

    requires_reauthentication = True

    def __init__(self):
        super().__init__(
            "No authentication session provided. "
            "Please connect and authenticate your wallet.",
            code="NO_SESSION",
        )


class InvalidSessionError(SceauException):
    """Raised when a session fails verification (expired or forged)."""

    requires_reauthentication = True

    def __init__(self):
        super().__init__(
            "Invalid or expired authentication session",
            code="INVALID_SESSION",
        )


class UnauthorizedError(SceauException):
    """Raised when a valid identity does not own the target resource."""

    def __init__(self, resource: str = "resource"):
        self.resource = resource
        super().__init__(
            f"Unauthorized: You can only modify your own {resource}",
            code="UNAUTHORIZED",
        )


class SignatureRejectedError(SceauException):
    """Raised by a signature provider when the user declines to sign."""

    def __init__(self, message: str = "User rejected the signature request"):
        super().__init__(message, code="SIGNATURE_REJECTED")


class WalletUnavailableError(SceauException):
    """Raised when no wallet provider is available to sign."""

    def __init__(self, message: str = "No wallet provider available"):
        super().__init__(message, code="WALLET_UNAVAILABLE")


class SessionDecodeError(ValueError):
    """Raised when stored session data cannot be decoded."""
