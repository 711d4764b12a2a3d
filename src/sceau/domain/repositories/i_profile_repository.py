"""
Creator profile repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sceau.domain.entities.creator_profile import CreatorProfile


class IProfileRepository(ABC):
    """Interface for creator profile persistence operations."""

    @abstractmethod
    async def get_by_wallet(self, wallet_address: str) -> Optional[CreatorProfile]:
        """
        Get profile by wallet address.

        Args:
            wallet_address: Wallet address

        Returns:
            CreatorProfile if found, None otherwise
        """

    @abstractmethod
    async def upsert(self, profile: CreatorProfile) -> CreatorProfile:
        """
        Insert or update profile keyed on wallet_address.

        Args:
            profile: Profile entity with new data

        Returns:
            Stored profile entity
        """
