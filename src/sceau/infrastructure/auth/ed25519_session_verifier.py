"""
Ed25519 Solana session verifier.

Implements real signature verification for Solana sessions using
Ed25519. Opt-in replacement for SolanaSessionVerifier.
"""

import base64
import binascii
from typing import Optional

import base58
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from sceau.domain.entities.session import Session
from sceau.domain.services.challenge_message import matches_challenge
from sceau.domain.services.clock import Clock, now_ms
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class Ed25519SessionVerifier(ISessionVerifier):
    """
    Solana session verification using Ed25519 signatures.

    The session address is the base58 public key; the signature is the
    base64 encoded detached signature over the UTF-8 message bytes.
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
        Verify Solana session signature.

        Args:
            session: Session to verify
            now_ms: Current time override (ms since epoch)

        Returns:
            True if the session is unexpired, matches its signed message
            and carries a valid signature for address
        """
        now = self.clock() if now_ms is None else now_ms
        if session.is_expired(now):
            return False

        if not (session.address and session.signature and session.message):
            return False

        if not matches_challenge(session, WalletScheme.SOLANA):
            logger.debug(
                f"Session fields disagree with signed message for "
                f"{mask_address(session.address)}"
            )
            return False

        try:
            # Decode wallet public key from base58
            public_key_bytes = base58.b58decode(session.address)
            verify_key = VerifyKey(public_key_bytes)

            signature_bytes = base64.b64decode(session.signature, validate=True)
            message_bytes = session.message.encode("utf-8")

            verify_key.verify(message_bytes, signature_bytes)
            return True

        except BadSignatureError:
            logger.debug(f"Bad Ed25519 signature for {mask_address(session.address)}")
            return False
        except (ValueError, TypeError, binascii.Error) as e:
            logger.debug(f"Malformed Solana session: {type(e).__name__}: {e}")
            return False
