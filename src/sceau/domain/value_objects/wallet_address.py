"""
WalletAddress value object - Immutable, validated wallet address.
"""

import re
from dataclasses import dataclass, field

from sceau.domain.value_objects.wallet_scheme import WalletScheme

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_HEX_ADDRESS = re.compile(r"^0x[0-9a-f]{40}$")


@dataclass(frozen=True)
class WalletAddress:
    """
    Value object representing a validated wallet address.

    Business rules:
    - ETHEREUM: 0x followed by 40 hex characters, stored lowercase
    - SOLANA: base58 characters, 32-44 long, stored verbatim
    - Immutable once created
    """

    address: str
    scheme: WalletScheme = field(default=WalletScheme.SOLANA)

    def __post_init__(self):
        """Validate and normalize wallet address on creation."""
        if not self.address:
            raise ValueError("Wallet address cannot be empty")

        normalized = self.scheme.normalize_address(self.address)
        object.__setattr__(self, "address", normalized)

        if self.scheme is WalletScheme.ETHEREUM:
            if not _HEX_ADDRESS.match(normalized):
                raise ValueError(f"Invalid Ethereum address: {self.address}")
            return

        if len(normalized) < 32 or len(normalized) > 44:
            raise ValueError(f"Invalid wallet address length: {len(normalized)}")

        if not all(c in BASE58_ALPHABET for c in normalized):
            raise ValueError("Wallet address contains invalid characters")

    def truncated(self) -> str:
        """Return truncated address for display (e.g., 'ABC...XYZ')."""
        return f"{self.address[:6]}...{self.address[-4:]}"

    def __str__(self) -> str:
        """String representation returns full address."""
        return self.address
