"""
Dependency Injection Container for Sceau.

Manages all service instances and their dependencies.
"""

from typing import Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.application.use_cases.create_course import CreateCourse
from sceau.application.use_cases.delete_course import DeleteCourse
from sceau.application.use_cases.delete_lesson import DeleteLesson
from sceau.application.use_cases.get_course_for_edit import GetCourseForEdit
from sceau.application.use_cases.get_dashboard_data import GetDashboardData
from sceau.application.use_cases.get_profile import GetProfile
from sceau.application.use_cases.update_course import UpdateCourse
from sceau.application.use_cases.update_profile import UpdateProfile
from sceau.config.settings import get_settings
from sceau.domain.repositories.i_course_repository import ICourseRepository
from sceau.domain.repositories.i_lesson_repository import ILessonRepository
from sceau.domain.repositories.i_profile_repository import IProfileRepository
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.auth import verifier_for
from sceau.infrastructure.persistence.database import Database
from sceau.infrastructure.persistence.repositories.course_repository import (
    CourseRepository,
)
from sceau.infrastructure.persistence.repositories.lesson_repository import (
    LessonRepository,
)
from sceau.infrastructure.persistence.repositories.profile_repository import (
    ProfileRepository,
)


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of the database, verifiers and guards.
    Repositories and use cases are session-scoped and built per request.
    """

    def __init__(self):
        """Initialize container with empty instances."""
        # Infrastructure
        self._database: Optional[Database] = None

        # Auth (one per wallet scheme)
        self._verifiers: Dict[WalletScheme, ISessionVerifier] = {}
        self._guards: Dict[WalletScheme, AuthorizationGuard] = {}

    async def initialize(self) -> None:
        """Initialize all services and establish connections."""
        await self.database.connect()
        if self.database.is_sqlite:
            await self.database.create_tables()

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._database:
            await self._database.disconnect()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=get_settings().DATABASE_URL,
                echo=get_settings().DATABASE_ECHO,
            )
        return self._database

    # Auth Getters

    def get_verifier(self, scheme: WalletScheme) -> ISessionVerifier:
        """Get session verifier for a wallet scheme."""
        if scheme not in self._verifiers:
            self._verifiers[scheme] = verifier_for(
                scheme,
                strict=get_settings().SOLANA_STRICT_VERIFICATION,
            )
        return self._verifiers[scheme]

    def get_guard(self, scheme: WalletScheme) -> AuthorizationGuard:
        """Get authorization guard for a wallet scheme."""
        if scheme not in self._guards:
            self._guards[scheme] = AuthorizationGuard(
                verifier=self.get_verifier(scheme),
                scheme=scheme,
            )
        return self._guards[scheme]

    # Repository Getters (Session-scoped)

    def get_course_repository(self, session: AsyncSession) -> ICourseRepository:
        """Get course repository bound to a database session."""
        return CourseRepository(session)

    def get_lesson_repository(self, session: AsyncSession) -> ILessonRepository:
        """Get lesson repository bound to a database session."""
        return LessonRepository(session)

    def get_profile_repository(self, session: AsyncSession) -> IProfileRepository:
        """Get profile repository bound to a database session."""
        return ProfileRepository(session)

    # Use Case Getters

    def get_create_course(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> CreateCourse:
        """Get create course use case."""
        return CreateCourse(
            guard=self.get_guard(scheme),
            course_repository=self.get_course_repository(session),
        )

    def get_get_course_for_edit(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> GetCourseForEdit:
        """Get course-for-edit use case."""
        return GetCourseForEdit(
            guard=self.get_guard(scheme),
            course_repository=self.get_course_repository(session),
        )

    def get_update_course(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> UpdateCourse:
        """Get update course use case."""
        return UpdateCourse(
            guard=self.get_guard(scheme),
            course_repository=self.get_course_repository(session),
        )

    def get_delete_course(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> DeleteCourse:
        """Get delete course use case."""
        return DeleteCourse(
            guard=self.get_guard(scheme),
            course_repository=self.get_course_repository(session),
        )

    def get_delete_lesson(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> DeleteLesson:
        """Get delete lesson use case."""
        return DeleteLesson(
            guard=self.get_guard(scheme),
            lesson_repository=self.get_lesson_repository(session),
        )

    def get_update_profile(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> UpdateProfile:
        """Get update profile use case."""
        return UpdateProfile(
            guard=self.get_guard(scheme),
            profile_repository=self.get_profile_repository(session),
        )

    def get_get_profile(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> GetProfile:
        """Get public profile lookup use case."""
        return GetProfile(
            profile_repository=self.get_profile_repository(session),
            scheme=scheme,
        )

    def get_get_dashboard_data(
        self, session: AsyncSession, scheme: WalletScheme
    ) -> GetDashboardData:
        """Get dashboard use case."""
        return GetDashboardData(
            guard=self.get_guard(scheme),
            course_repository=self.get_course_repository(session),
            profile_repository=self.get_profile_repository(session),
        )


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()


def reset_container() -> None:
    """Drop the global container (for testing)."""
    global _container
    _container = None
