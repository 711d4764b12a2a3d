"""
Session verifier service interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sceau.domain.entities.session import Session


class ISessionVerifier(ABC):
    """
    Abstract service interface for session verification.

    Implementations never raise for an invalid session; they return
    False. Expiry is always checked before any cryptography.
    """

    @abstractmethod
    def verify(self, session: Session, now_ms: Optional[int] = None) -> bool:
        """
        Verify a session.

        Args:
            session: Session to verify
            now_ms: Current time override (ms since epoch)

        Returns:
            True if session is valid, False otherwise
        """
