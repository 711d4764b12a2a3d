"""
Signature provider interface.
"""

from abc import ABC, abstractmethod
from typing import Union


class ISignatureProvider(ABC):
    """
    Abstract interface for a wallet that can sign arbitrary messages.

    The wallet holds the private key; signing usually waits on the user
    approving a prompt, so sign_message may suspend indefinitely.
    """

    @abstractmethod
    async def sign_message(
        self, message: Union[str, bytes]
    ) -> Union[str, bytes]:
        """
        Sign a message.

        Args:
            message: Challenge text (recoverable schemes) or its UTF-8
                bytes (schemes that sign byte buffers)

        Returns:
            Raw signature bytes or hex string

        Raises:
            SignatureRejectedError: If the user declines to sign
        """
