"""
Solana session verifier (structural check only).

Solana signatures are not verified here. The check is limited to expiry
and the presence of address, signature and message, which gives no
cryptographic guarantee that the claimed address produced the
signature. Ed25519SessionVerifier implements real verification behind
the same interface and is enabled with SOLANA_STRICT_VERIFICATION.
"""

from typing import Optional

from sceau.domain.entities.session import Session
from sceau.domain.services.clock import Clock, now_ms
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class SolanaSessionVerifier(ISessionVerifier):
    """Weak Solana session verification: expiry + non-empty fields."""

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize verifier.

        Args:
            clock: Millisecond clock (defaults to wall clock)
        """
        self.clock = clock or now_ms
        logger.warning(
            "Solana sessions use structural verification only; "
            "signatures are not cryptographically checked"
        )

    def verify(self, session: Session, now_ms: Optional[int] = None) -> bool:
        """
        Verify Solana session structure and expiry.

        Args:
            session: Session to verify
            now_ms: Current time override (ms since epoch)

        Returns:
            True if unexpired and all of address/signature/message are set
        """
        now = self.clock() if now_ms is None else now_ms
        if session.is_expired(now):
            return False

        return bool(session.address and session.signature and session.message)
