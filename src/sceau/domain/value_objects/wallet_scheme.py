"""
WalletScheme value object - Supported wallet signature schemes.
"""

from enum import Enum


class WalletScheme(str, Enum):
    """
    Wallet signature scheme.

    Each scheme owns an independent session namespace (its own storage
    key), so an Ethereum session and a Solana session can coexist in the
    same client context without overwriting each other.

    Business rules:
    - ETHEREUM signatures are recoverable (signer derivable from
      message + signature); addresses are case-insensitive hex
    - SOLANA signatures are not recovered here; addresses are base58
      and therefore case-sensitive
    """

    ETHEREUM = "ethereum"
    SOLANA = "solana"

    @property
    def session_key(self) -> str:
        """Storage key (local store and cookie name) for this scheme."""
        if self is WalletScheme.ETHEREUM:
            return "wallet_session"
        return "solana_session"

    @property
    def recoverable(self) -> bool:
        """Whether the signer can be recovered from (message, signature)."""
        return self is WalletScheme.ETHEREUM

    @property
    def signs_bytes(self) -> bool:
        """Whether the wallet signs a byte buffer instead of a string."""
        return self is WalletScheme.SOLANA

    def normalize_address(self, address: str) -> str:
        """
        Normalize address for storage and comparison.

        Args:
            address: Raw address as reported by the wallet

        Returns:
            Lowercased hex address (ETHEREUM) or stripped base58 (SOLANA)
        """
        address = (address or "").strip()
        if self is WalletScheme.ETHEREUM:
            return address.lower()
        return address

    def addresses_match(self, left: str | None, right: str | None) -> bool:
        """Compare two addresses under this scheme's rules."""
        if not left or not right:
            return False
        return self.normalize_address(left) == self.normalize_address(right)

    @classmethod
    def parse(cls, value: "str | WalletScheme") -> "WalletScheme":
        """
        Parse scheme from string (case-insensitive).

        Raises:
            ValueError: If scheme is unknown
        """
        if isinstance(value, WalletScheme):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = [s.value for s in cls]
            raise ValueError(
                f"Unknown wallet scheme: {value}. Must be one of: {allowed}"
            )
