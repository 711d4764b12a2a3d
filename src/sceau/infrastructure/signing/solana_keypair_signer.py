"""
Solana keypair signature provider.

Signs challenge bytes with a local Ed25519 keypair (CLI logins, tests).
"""

import json
from typing import Union

import base58
from nacl.signing import SigningKey

from sceau.domain.services.i_signature_provider import ISignatureProvider


class SolanaKeypairSigner(ISignatureProvider):
    """Sign messages with a Solana Ed25519 keypair held in memory."""

    def __init__(self, signing_key: SigningKey):
        """
        Initialize signer.

        Args:
            signing_key: Ed25519 signing key
        """
        self.signing_key = signing_key

    @classmethod
    def generate(cls) -> "SolanaKeypairSigner":
        """Create signer with a fresh random keypair."""
        return cls(SigningKey.generate())

    @classmethod
    def from_keypair_file(cls, keypair_path: str) -> "SolanaKeypairSigner":
        """
        Load Solana keypair from JSON file.

        Args:
            keypair_path: Path to keypair JSON (array of 64 bytes,
                          secret key followed by public key)

        Returns:
            Signer for the keypair
        """
        with open(keypair_path, "r") as f:
            keypair_data = json.load(f)

        # First 32 bytes is the secret key
        secret_key_bytes = bytes(keypair_data[:32])
        return cls(SigningKey(secret_key_bytes))

    @property
    def address(self) -> str:
        """Base58 encoded public key (wallet address)."""
        return base58.b58encode(bytes(self.signing_key.verify_key)).decode()

    async def sign_message(self, message: Union[str, bytes]) -> bytes:
        """
        Sign message bytes.

        Args:
            message: Message bytes (str is UTF-8 encoded first)

        Returns:
            64-byte detached Ed25519 signature
        """
        if isinstance(message, str):
            message = message.encode("utf-8")
        return self.signing_key.sign(message).signature
