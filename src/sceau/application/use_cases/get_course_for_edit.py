"""
Get Course For Edit use case.
"""

from typing import Optional
from uuid import UUID

from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.domain.entities.course import Course
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import EntityNotFoundError
from sceau.domain.repositories.i_course_repository import ICourseRepository


class GetCourseForEdit:
    """Load a course with ordered lessons for its owner's editor."""

    def __init__(self, guard: AuthorizationGuard, course_repository: ICourseRepository):
        self.guard = guard
        self.course_repository = course_repository

    async def execute(self, session: Optional[Session], course_id: UUID) -> Course:
        """
        Execute course lookup for editing.

        Raises:
            NoSessionError / InvalidSessionError: If session check fails
            EntityNotFoundError: If course does not exist
            UnauthorizedError: If caller does not own the course
        """
        identity = self.guard.authenticate(session)

        owner = await self.course_repository.get_owner(course_id)
        if owner is None:
            raise EntityNotFoundError("Course", str(course_id))
        self.guard.ensure_owner(identity, owner, resource="courses")

        course = await self.course_repository.get_by_id(course_id)
        if course is None:
            raise EntityNotFoundError("Course", str(course_id))

        course.lessons = course.sorted_lessons()
        return course
