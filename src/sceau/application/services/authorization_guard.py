"""
Authorization guard - turns a presented session into a trusted identity.
"""

from typing import Dict, Optional

from sceau.domain.entities.session import Session
from sceau.domain.exceptions import (
    InvalidSessionError,
    NoSessionError,
    UnauthorizedError,
)
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.monitoring import metrics
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class AuthorizationGuard:
    """
    Per-operation session check used by every privileged action.

    Stateless: no session cache, every call re-verifies from scratch.
    Fails closed.
    """

    def __init__(self, verifier: ISessionVerifier, scheme: WalletScheme):
        """
        Initialize guard.

        Args:
            verifier: Session verifier for the scheme
            scheme: Wallet scheme (address normalisation and comparison)
        """
        self.verifier = verifier
        self.scheme = scheme

    def authenticate(self, session: Optional[Session]) -> str:
        """
        Verify session and extract the authenticated identity.

        Args:
            session: Session presented by the caller

        Returns:
            Normalized wallet address; the only identity the rest of the
            operation may trust

        Raises:
            NoSessionError: If no session was presented
            InvalidSessionError: If verification fails
        """
        if session is None:
            logger.warning(
                "Privileged operation called without a session",
                extra={"context": self._record("missing")},
            )
            raise NoSessionError()

        if not self.verifier.verify(session):
            logger.warning(
                f"Session verification failed for {mask_address(session.address)}",
                extra={"context": self._record("invalid")},
            )
            raise InvalidSessionError()

        self._record("valid")
        identity = self.scheme.normalize_address(session.address)
        logger.debug(f"Session verified for {mask_address(identity)}")
        return identity

    def ensure_owner(
        self,
        identity: str,
        owner: Optional[str],
        resource: str = "resource",
    ) -> None:
        """
        Check that the authenticated identity owns a stored resource.

        Args:
            identity: Authenticated identity from authenticate()
            owner: Owner identity stored with the resource
            resource: Resource name for the error message

        Raises:
            UnauthorizedError: If identity does not own the resource
        """
        if not self.scheme.addresses_match(identity, owner):
            logger.warning(
                f"{mask_address(identity)} denied on {resource} "
                f"owned by {mask_address(owner)}",
                extra={"context": self._record("forbidden")},
            )
            raise UnauthorizedError(resource)

    def _record(self, outcome: str) -> Dict[str, str]:
        """Count the check and return its fields for structured logs."""
        metrics.session_checks_total.labels(
            scheme=self.scheme.value, outcome=outcome
        ).inc()
        return {"scheme": self.scheme.value, "outcome": outcome}
