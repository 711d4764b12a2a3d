"""
Get Dashboard Data use case.
"""

from typing import Optional

from sceau.application.dto.course_dto import DashboardData, DashboardStats
from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.domain.entities.session import Session
from sceau.domain.repositories.i_course_repository import ICourseRepository
from sceau.domain.repositories.i_profile_repository import IProfileRepository


class GetDashboardData:
    """
    Load the creator dashboard for the authenticated wallet.

    Only the caller's own profile and courses are returned; the identity
    comes from the verified session, never from a request parameter.
    """

    def __init__(
        self,
        guard: AuthorizationGuard,
        course_repository: ICourseRepository,
        profile_repository: IProfileRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            guard: Authorization guard
            course_repository: Repository for courses
            profile_repository: Repository for profiles
        """
        self.guard = guard
        self.course_repository = course_repository
        self.profile_repository = profile_repository

    async def execute(self, session: Optional[Session]) -> DashboardData:
        """
        Execute dashboard lookup.

        Returns:
            DashboardData with profile (or None), courses newest first,
            and course / lesson totals

        Raises:
            NoSessionError / InvalidSessionError: If session check fails
        """
        identity = self.guard.authenticate(session)

        profile = await self.profile_repository.get_by_wallet(identity)
        courses = await self.course_repository.list_by_creator(identity)
        for course in courses:
            course.lessons = course.sorted_lessons()

        return DashboardData(
            profile=profile,
            courses=courses,
            stats=DashboardStats(
                total_courses=len(courses),
                total_lessons=sum(len(course.lessons) for course in courses),
            ),
        )
