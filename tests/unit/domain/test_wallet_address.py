"""
Unit tests for WalletAddress value object.

Tests wallet address validation and formatting.
"""

import pytest

from sceau.domain.value_objects.wallet_address import WalletAddress
from sceau.domain.value_objects.wallet_scheme import WalletScheme


class TestWalletAddress:
    """Unit tests for WalletAddress value object."""

    # ================================================================
    # Solana
    # ================================================================

    def test_create_valid_solana_address(self):
        """Test creating WalletAddress with valid address."""
        address = "DYw8jCTfwHNRJhhmFcbXvVDTqWMEVFBX6ZKUmG5CNSKK"
        wallet = WalletAddress(address=address)

        assert wallet.address == address
        assert wallet.scheme is WalletScheme.SOLANA

    def test_solana_length_bounds(self):
        """32 and 44 characters are accepted."""
        assert WalletAddress("A" * 32).address == "A" * 32
        assert WalletAddress("B" * 44).address == "B" * 44

    def test_reject_empty_address(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            WalletAddress(address="")

    def test_reject_too_short_address(self):
        with pytest.raises(ValueError, match="Invalid wallet address length"):
            WalletAddress(address="Short123")

    def test_reject_non_base58(self):
        """0, O, I and l are not in the base58 alphabet."""
        with pytest.raises(ValueError, match="invalid characters"):
            WalletAddress(address="0" * 32)

    # ================================================================
    # Ethereum
    # ================================================================

    def test_ethereum_address_lowercased(self):
        wallet = WalletAddress(
            "0xAbCdEf0000000000000000000000000000000001", WalletScheme.ETHEREUM
        )

        assert wallet.address == "0xabcdef0000000000000000000000000000000001"

    def test_reject_short_ethereum_address(self):
        with pytest.raises(ValueError, match="Invalid Ethereum address"):
            WalletAddress("0x1234", WalletScheme.ETHEREUM)

    def test_reject_ethereum_without_prefix(self):
        with pytest.raises(ValueError):
            WalletAddress("ab" * 20, WalletScheme.ETHEREUM)

    # ================================================================
    # Formatting
    # ================================================================

    def test_truncated(self):
        wallet = WalletAddress("DYw8jCTfwHNRJhhmFcbXvVDTqWMEVFBX6ZKUmG5CNSKK")

        assert wallet.truncated() == "DYw8jC...NSKK"

    def test_str_returns_full_address(self):
        address = "DYw8jCTfwHNRJhhmFcbXvVDTqWMEVFBX6ZKUmG5CNSKK"

        assert str(WalletAddress(address)) == address
