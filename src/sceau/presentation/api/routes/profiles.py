"""
Creator profile and dashboard API routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from sceau.application.dto.course_dto import UpdateProfileCommand
from sceau.application.use_cases.get_dashboard_data import GetDashboardData
from sceau.application.use_cases.get_profile import GetProfile
from sceau.application.use_cases.update_profile import UpdateProfile
from sceau.di.dependencies import (
    get_get_dashboard_data,
    get_get_profile,
    get_update_profile,
)
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import EntityNotFoundError
from sceau.presentation.api.middleware.session import get_current_session
from sceau.presentation.schemas.profile_schemas import (
    DashboardResponse,
    ProfileResponse,
    UpdateProfileRequest,
)

router = APIRouter(tags=["Profiles"])


@router.get(
    "/profiles/{wallet_address}",
    response_model=ProfileResponse,
    summary="Get public creator profile",
)
async def get_profile(
    wallet_address: str,
    use_case: GetProfile = Depends(get_get_profile),
) -> ProfileResponse:
    """
    Public profile lookup.

    Raises:
        EntityNotFoundError: If the wallet has no profile
    """
    profile = await use_case.execute(wallet_address)
    if profile is None:
        raise EntityNotFoundError("CreatorProfile", wallet_address)
    return ProfileResponse(**profile.to_dict())


@router.put(
    "/profiles/{wallet_address}",
    response_model=ProfileResponse,
    summary="Create or update own profile",
)
async def update_profile(
    wallet_address: str,
    request: UpdateProfileRequest,
    session: Optional[Session] = Depends(get_current_session),
    use_case: UpdateProfile = Depends(get_update_profile),
) -> ProfileResponse:
    """Upsert the profile of the session's wallet."""
    command = UpdateProfileCommand(
        wallet_address=wallet_address,
        display_name=request.display_name,
        avatar_url=request.avatar_url,
        about_me=request.about_me,
        website_url=request.website_url,
        twitter_handle=request.twitter_handle,
    )
    profile = await use_case.execute(session=session, command=command)
    return ProfileResponse(**profile.to_dict())


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Creator dashboard",
)
async def get_dashboard(
    session: Optional[Session] = Depends(get_current_session),
    use_case: GetDashboardData = Depends(get_get_dashboard_data),
) -> DashboardResponse:
    """Profile, own courses (newest first) and totals for the session's wallet."""
    data = await use_case.execute(session=session)
    return DashboardResponse(**data.to_dict())
