"""
Authenticate Wallet use case.
"""

import base64
from typing import Optional, Union

from sceau.domain.entities.session import Session
from sceau.domain.exceptions import (
    AuthenticationError,
    SignatureRejectedError,
    ValidationError,
    WalletUnavailableError,
)
from sceau.domain.services.challenge_message import build_message
from sceau.domain.services.clock import Clock, now_ms
from sceau.domain.services.i_session_store import ISessionStore
from sceau.domain.services.i_signature_provider import ISignatureProvider
from sceau.domain.value_objects.wallet_address import WalletAddress
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.monitoring import metrics
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class AuthenticateWallet:
    """
    Create a new session by having the wallet sign a challenge.

    Business rules:
    - Only invoked on an explicit user action, never silently
    - Signing may wait indefinitely on the user; no timeout, no retry
    - The new session replaces any stored session unconditionally, even
      one for a different address, so callers must pass the currently
      connected address
    """

    def __init__(
        self,
        session_store: ISessionStore,
        scheme: WalletScheme,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            session_store: Store the new session is written through
            scheme: Wallet scheme of the signer
            clock: Millisecond clock (defaults to wall clock)
        """
        self.session_store = session_store
        self.scheme = scheme
        self.clock = clock or now_ms

    async def execute(
        self,
        signer: Optional[ISignatureProvider],
        address: str,
    ) -> Session:
        """
        Execute wallet authentication.

        Args:
            signer: Wallet signature provider (None if no wallet present)
            address: Currently connected wallet address

        Returns:
            Newly issued and stored Session

        Raises:
            AuthenticationError: If the wallet is missing, the user
                rejects the request, or the provider fails
            ValidationError: If address is malformed for the scheme
        """
        if signer is None:
            self._record("unavailable")
            raise AuthenticationError("No wallet provider available")

        try:
            wallet = WalletAddress(address=address, scheme=self.scheme)
        except ValueError as e:
            raise ValidationError(field="address", reason=str(e)) from e

        logger.info(f"Authenticating {self.scheme.value} wallet {wallet.truncated()}")

        timestamp = self.clock()
        message = build_message(wallet.address, timestamp)

        # Byte-signing wallets receive the UTF-8 encoding of the message
        payload: Union[str, bytes] = (
            message.encode("utf-8") if self.scheme.signs_bytes else message
        )

        try:
            raw_signature = await signer.sign_message(payload)
        except SignatureRejectedError as e:
            logger.info(f"Signature request rejected for {wallet.truncated()}: {e}")
            self._record("rejected")
            raise AuthenticationError(
                "User rejected the signature request", rejected=True
            ) from e
        except WalletUnavailableError as e:
            logger.error(f"Wallet unavailable for {wallet.truncated()}: {e}")
            self._record("unavailable")
            raise AuthenticationError("No wallet provider available") from e
        except Exception as e:
            logger.error(
                f"Wallet provider failed for {wallet.truncated()}: "
                f"{type(e).__name__}: {e}",
                exc_info=True,
            )
            self._record("failed")
            raise AuthenticationError(f"Wallet provider failed: {e}") from e

        session = Session.issue(
            address=wallet.address,
            signature=self._encode_signature(raw_signature),
            message=message,
            timestamp=timestamp,
        )
        self.session_store.set(session)

        self._record("success")
        logger.info(f"Wallet authenticated: {mask_address(session.address)}")
        return session

    def _encode_signature(self, raw: Union[str, bytes, bytearray]) -> str:
        """
        Encode raw signature into the stored string form.

        SOLANA: base64 of the signature bytes.
        ETHEREUM: 0x-prefixed hex.
        """
        if not raw:
            logger.error("Wallet provider returned an empty signature")
            self._record("failed")
            raise AuthenticationError("Wallet provider returned an empty signature")

        if isinstance(raw, (bytes, bytearray, memoryview)):
            raw_bytes = bytes(raw)
            if self.scheme is WalletScheme.SOLANA:
                return base64.b64encode(raw_bytes).decode("ascii")
            return "0x" + raw_bytes.hex()

        if self.scheme is WalletScheme.ETHEREUM and not raw.startswith("0x"):
            return "0x" + raw
        return raw

    def _record(self, outcome: str) -> None:
        metrics.authentications_total.labels(
            scheme=self.scheme.value, outcome=outcome
        ).inc()
