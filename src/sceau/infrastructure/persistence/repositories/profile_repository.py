"""
Creator profile repository implementation.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sceau.domain.entities.creator_profile import CreatorProfile
from sceau.domain.repositories.i_profile_repository import IProfileRepository
from sceau.infrastructure.persistence.models import CreatorProfileModel


class ProfileRepository(IProfileRepository):
    """SQLAlchemy implementation of creator profile repository."""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_wallet(self, wallet_address: str) -> Optional[CreatorProfile]:
        """Get profile by wallet address."""
        model = await self._fetch_model(wallet_address)
        return self._to_entity(model) if model else None

    async def upsert(self, profile: CreatorProfile) -> CreatorProfile:
        """
        Insert or update profile keyed on wallet_address.

        Verification flags are never written from here.
        """
        model = await self._fetch_model(profile.wallet_address)

        if model is None:
            model = CreatorProfileModel(
                id=profile.id,
                wallet_address=profile.wallet_address,
                created_at=profile.created_at,
            )
            self.session.add(model)

        model.display_name = profile.display_name
        model.avatar_url = profile.avatar_url
        model.about_me = profile.about_me
        model.website_url = profile.website_url
        model.twitter_handle = profile.twitter_handle
        model.updated_at = datetime.now()

        await self.session.flush()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def _fetch_model(self, wallet_address: str) -> Optional[CreatorProfileModel]:
        stmt = select(CreatorProfileModel).where(
            CreatorProfileModel.wallet_address == wallet_address
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: CreatorProfileModel) -> CreatorProfile:
        """Convert database model to domain entity."""
        return CreatorProfile(
            id=model.id,
            wallet_address=model.wallet_address,
            display_name=model.display_name,
            avatar_url=model.avatar_url,
            about_me=model.about_me,
            website_url=model.website_url,
            twitter_handle=model.twitter_handle,
            is_verified=bool(model.is_verified),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
