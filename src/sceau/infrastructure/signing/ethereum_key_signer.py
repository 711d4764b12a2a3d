"""
Ethereum private-key signature provider.

Signs challenge text with EIP-191 personal_sign using a local key.
"""

from typing import Union

from eth_account import Account
from eth_account.messages import encode_defunct

from sceau.domain.services.i_signature_provider import ISignatureProvider


class EthereumKeySigner(ISignatureProvider):
    """Sign messages with an Ethereum private key held in memory."""

    def __init__(self, private_key: Union[str, bytes]):
        """
        Initialize signer.

        Args:
            private_key: 32-byte private key (bytes or hex string)
        """
        self._account = Account.from_key(private_key)

    @classmethod
    def generate(cls) -> "EthereumKeySigner":
        """Create signer with a fresh random key."""
        return cls(Account.create().key)

    @property
    def address(self) -> str:
        """Checksummed account address."""
        return self._account.address

    async def sign_message(self, message: Union[str, bytes]) -> bytes:
        """
        Sign message text with personal_sign.

        Args:
            message: Message text (bytes are decoded as UTF-8)

        Returns:
            65-byte signature (r || s || v)
        """
        if isinstance(message, bytes):
            message = message.decode("utf-8")
        signed = self._account.sign_message(encode_defunct(text=message))
        return bytes(signed.signature)
