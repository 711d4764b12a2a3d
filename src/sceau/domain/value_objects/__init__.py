"""
Value objects for Sceau domain.
"""

from sceau.domain.value_objects.wallet_address import WalletAddress
from sceau.domain.value_objects.wallet_scheme import WalletScheme

__all__ = [
    "WalletAddress",
    "WalletScheme",
]
