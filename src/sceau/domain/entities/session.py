"""
Session entity - Signature-backed wallet login.
"""

from dataclasses import dataclass

# Fixed session lifetime: 24 hours in milliseconds
SESSION_DURATION_MS = 24 * 60 * 60 * 1000


@dataclass(frozen=True)
class Session:
    """
    Session entity - time-boxed, signature-backed claim of address ownership.

    Business rules:
    - expires_at == timestamp + SESSION_DURATION_MS at creation
    - Immutable; refreshing means issuing a new session
    - message is kept verbatim, verification re-derives the signer from it
    """

    address: str
    signature: str
    message: str
    timestamp: int
    expires_at: int

    @classmethod
    def issue(
        cls,
        address: str,
        signature: str,
        message: str,
        timestamp: int,
    ) -> "Session":
        """
        Create a new session with the fixed lifetime.

        Args:
            address: Normalized signer address
            signature: Encoded signature over message
            message: Exact challenge string that was signed
            timestamp: Issuance time (ms since epoch)

        Returns:
            New Session expiring SESSION_DURATION_MS after timestamp
        """
        return cls(
            address=address,
            signature=signature,
            message=message,
            timestamp=timestamp,
            expires_at=timestamp + SESSION_DURATION_MS,
        )

    def is_expired(self, now_ms: int) -> bool:
        """Check if session is expired at given time."""
        return now_ms > self.expires_at

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape (camelCase expiresAt)."""
        return {
            "address": self.address,
            "signature": self.signature,
            "message": self.message,
            "timestamp": self.timestamp,
            "expiresAt": self.expires_at,
        }
