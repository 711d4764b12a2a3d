"""
Ethereum session verifier.

Implements recoverable-signature verification using EIP-191
personal_sign messages.
"""

from typing import Optional

from eth_account import Account
from eth_account.messages import encode_defunct

from sceau.domain.entities.session import Session
from sceau.domain.services.challenge_message import matches_challenge
from sceau.domain.services.clock import Clock, now_ms
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class EthereumSessionVerifier(ISessionVerifier):
    """
    Ethereum session verification via public-key recovery.

    Recovers the signer address from (message, signature) and compares
    it case-insensitively with the session address. Forging a session
    for an address requires that address's private key. Timestamp and
    expiry are only trusted as far as the signed message repeats them.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize verifier.

        Args:
            clock: Millisecond clock (defaults to wall clock)
        """
        self.clock = clock or now_ms

    def verify(self, session: Session, now_ms: Optional[int] = None) -> bool:
        """
        Verify Ethereum session.

        Args:
            session: Session to verify
            now_ms: Current time override (ms since epoch)

        Returns:
            True if the signature of an unexpired, self-consistent
            session recovers to session.address
        """
        now = self.clock() if now_ms is None else now_ms
        if session.is_expired(now):
            logger.debug(f"Session expired for {mask_address(session.address)}")
            return False

        if not matches_challenge(session, WalletScheme.ETHEREUM):
            logger.debug(
                f"Session fields disagree with signed message for "
                f"{mask_address(session.address)}"
            )
            return False

        recovered = self.recover_address(session.message, session.signature)
        if recovered is None:
            return False

        if recovered.lower() != (session.address or "").lower():
            logger.debug(
                f"Signer mismatch: recovered {mask_address(recovered)}, "
                f"claimed {mask_address(session.address)}"
            )
            return False

        return True

    @staticmethod
    def recover_address(message: str, signature: str) -> Optional[str]:
        """
        Recover signer address from a personal_sign signature.

        Args:
            message: Signed message text
            signature: Hex signature (65 bytes, 0x-prefixed or not)

        Returns:
            Checksummed signer address, or None if signature is malformed
        """
        try:
            signable = encode_defunct(text=message)
            return Account.recover_message(signable, signature=signature)
        except Exception as e:
            # Malformed encodings are a verification failure, not an error
            logger.debug(f"Signature recovery failed: {type(e).__name__}: {e}")
            return None
