"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
Use cases are built per request around a request-scoped database
session and the wallet scheme the request names.
"""

from typing import AsyncGenerator, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from sceau.application.use_cases.create_course import CreateCourse
from sceau.application.use_cases.delete_course import DeleteCourse
from sceau.application.use_cases.delete_lesson import DeleteLesson
from sceau.application.use_cases.get_course_for_edit import GetCourseForEdit
from sceau.application.use_cases.get_dashboard_data import GetDashboardData
from sceau.application.use_cases.get_profile import GetProfile
from sceau.application.use_cases.update_course import UpdateCourse
from sceau.application.use_cases.update_profile import UpdateProfile
from sceau.config.settings import get_settings
from sceau.di.container import get_container
from sceau.domain.exceptions import ValidationError
from sceau.domain.value_objects.wallet_scheme import WalletScheme

# ================================================================
# Database Dependencies
# ================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Yields async database session from container.
    Commits after the request, rolls back on error.
    """
    container = get_container()
    async with container.database.session() as session:
        yield session


# ================================================================
# Scheme Dependencies
# ================================================================


def get_wallet_scheme(
    x_wallet_scheme: Optional[str] = Header(default=None),
) -> WalletScheme:
    """
    Resolve the wallet scheme of the request.

    Raises:
        ValidationError: If the header names an unknown scheme
    """
    if not x_wallet_scheme:
        return get_settings().DEFAULT_WALLET_SCHEME
    try:
        return WalletScheme.parse(x_wallet_scheme)
    except ValueError as e:
        raise ValidationError("X-Wallet-Scheme", str(e)) from e


def get_guard(scheme: WalletScheme = Depends(get_wallet_scheme)):
    """Get AuthorizationGuard for the request's scheme."""
    return get_container().get_guard(scheme)


def get_verifier(scheme: WalletScheme = Depends(get_wallet_scheme)):
    """Get session verifier for the request's scheme."""
    return get_container().get_verifier(scheme)


# ================================================================
# Use Case Dependencies
# ================================================================


def get_create_course(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> CreateCourse:
    """Get CreateCourse use case dependency."""
    return get_container().get_create_course(session, scheme)


def get_get_course_for_edit(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> GetCourseForEdit:
    """Get GetCourseForEdit use case dependency."""
    return get_container().get_get_course_for_edit(session, scheme)


def get_update_course(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> UpdateCourse:
    """Get UpdateCourse use case dependency."""
    return get_container().get_update_course(session, scheme)


def get_delete_course(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> DeleteCourse:
    """Get DeleteCourse use case dependency."""
    return get_container().get_delete_course(session, scheme)


def get_delete_lesson(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> DeleteLesson:
    """Get DeleteLesson use case dependency."""
    return get_container().get_delete_lesson(session, scheme)


def get_update_profile(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> UpdateProfile:
    """Get UpdateProfile use case dependency."""
    return get_container().get_update_profile(session, scheme)


def get_get_profile(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> GetProfile:
    """Get GetProfile use case dependency."""
    return get_container().get_get_profile(session, scheme)


def get_get_dashboard_data(
    session: AsyncSession = Depends(get_db_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
) -> GetDashboardData:
    """Get GetDashboardData use case dependency."""
    return get_container().get_get_dashboard_data(session, scheme)
