"""
Client-side session lifecycle use cases: restore on startup, logout.
"""

from typing import Optional

from sceau.domain.entities.session import Session
from sceau.domain.services.i_session_store import ISessionStore
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class RestoreSession:
    """
    Restore the previous login state of a client context.

    Reads the stored session (expired ones are evicted by the store) and
    verifies it; a session that fails verification is cleared so the
    user is prompted to sign again.
    """

    def __init__(self, session_store: ISessionStore, verifier: ISessionVerifier):
        """
        Initialize use case.

        Args:
            session_store: Client session store
            verifier: Verifier for the store's scheme
        """
        self.session_store = session_store
        self.verifier = verifier

    def execute(self) -> Optional[Session]:
        """
        Return the stored session if still valid.

        Returns:
            Valid Session or None
        """
        session = self.session_store.get()
        if session is None:
            return None

        if not self.verifier.verify(session):
            logger.info(
                f"Stored session for {mask_address(session.address)} "
                f"failed verification, clearing"
            )
            self.session_store.clear()
            return None

        return session


class Logout:
    """Discard the current session from every storage location."""

    def __init__(self, session_store: ISessionStore):
        self.session_store = session_store

    def execute(self) -> None:
        self.session_store.clear()
        logger.info("Session cleared")
