"""
Local signature providers.
"""

from sceau.infrastructure.signing.ethereum_key_signer import EthereumKeySigner
from sceau.infrastructure.signing.solana_keypair_signer import SolanaKeypairSigner

__all__ = [
    "EthereumKeySigner",
    "SolanaKeypairSigner",
]
