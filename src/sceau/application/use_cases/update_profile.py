"""
Update Profile use case.

Handles creator profile creation and updates.
"""

from typing import Optional

from sceau.application.dto.course_dto import UpdateProfileCommand
from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.domain.entities.creator_profile import CreatorProfile
from sceau.domain.entities.session import Session
from sceau.domain.repositories.i_profile_repository import IProfileRepository
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim value; blank becomes None."""
    return (value or "").strip() or None


class UpdateProfile:
    """
    Use case for creating or updating a creator profile.

    Business rules:
    - A wallet can only write its own profile
    - Leading @ is stripped from the Twitter handle
    - Blank fields are stored as None
    """

    def __init__(self, guard: AuthorizationGuard, profile_repository: IProfileRepository):
        """
        Initialize use case.

        Args:
            guard: Authorization guard
            profile_repository: Profile repository
        """
        self.guard = guard
        self.profile_repository = profile_repository

    async def execute(
        self,
        session: Optional[Session],
        command: UpdateProfileCommand,
    ) -> CreatorProfile:
        """
        Upsert profile.

        Args:
            session: Caller's session
            command: Command with profile fields

        Returns:
            Stored profile entity

        Raises:
            NoSessionError / InvalidSessionError: If session check fails
            UnauthorizedError: If command targets another wallet
        """
        identity = self.guard.authenticate(session)
        self.guard.ensure_owner(identity, command.wallet_address, resource="profile")

        twitter_handle = (command.twitter_handle or "").strip()
        if twitter_handle.startswith("@"):
            twitter_handle = twitter_handle[1:]

        profile = CreatorProfile(
            wallet_address=identity,
            display_name=_clean(command.display_name),
            avatar_url=_clean(command.avatar_url),
            about_me=_clean(command.about_me),
            website_url=_clean(command.website_url),
            twitter_handle=_clean(twitter_handle),
        )
        stored = await self.profile_repository.upsert(profile)

        logger.info(f"Profile updated for {mask_address(identity)}")
        return stored
