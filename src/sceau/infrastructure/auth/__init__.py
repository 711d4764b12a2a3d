"""
Session verification and encoding.
"""

from typing import Optional

from sceau.domain.services.clock import Clock
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.auth.ed25519_session_verifier import Ed25519SessionVerifier
from sceau.infrastructure.auth.ethereum_session_verifier import (
    EthereumSessionVerifier,
)
from sceau.infrastructure.auth.session_codec import (
    SessionCodec,
    decode_cookie_value,
    encode_cookie_value,
)
from sceau.infrastructure.auth.solana_session_verifier import SolanaSessionVerifier


def verifier_for(
    scheme: WalletScheme,
    strict: bool = False,
    clock: Optional[Clock] = None,
) -> ISessionVerifier:
    """
    Build the session verifier for a wallet scheme.

    Args:
        scheme: Wallet scheme
        strict: Use Ed25519 verification for Solana instead of the
                structural check
        clock: Millisecond clock override

    Returns:
        ISessionVerifier implementation
    """
    if scheme is WalletScheme.ETHEREUM:
        return EthereumSessionVerifier(clock=clock)
    if strict:
        return Ed25519SessionVerifier(clock=clock)
    return SolanaSessionVerifier(clock=clock)


__all__ = [
    "SessionCodec",
    "encode_cookie_value",
    "decode_cookie_value",
    "EthereumSessionVerifier",
    "SolanaSessionVerifier",
    "Ed25519SessionVerifier",
    "verifier_for",
]
