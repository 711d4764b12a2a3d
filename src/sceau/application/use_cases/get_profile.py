"""
Get Profile use case.
"""

from typing import Optional

from sceau.domain.entities.creator_profile import CreatorProfile
from sceau.domain.repositories.i_profile_repository import IProfileRepository
from sceau.domain.value_objects.wallet_scheme import WalletScheme


class GetProfile:
    """Public profile lookup; no session required."""

    def __init__(self, profile_repository: IProfileRepository, scheme: WalletScheme):
        self.profile_repository = profile_repository
        self.scheme = scheme

    async def execute(self, wallet_address: str) -> Optional[CreatorProfile]:
        """Return profile for wallet, or None for wallets without one."""
        return await self.profile_repository.get_by_wallet(
            self.scheme.normalize_address(wallet_address)
        )
