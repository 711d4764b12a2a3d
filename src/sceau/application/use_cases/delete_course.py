"""
Delete Course use case.
"""

from typing import Optional
from uuid import UUID

from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import EntityNotFoundError
from sceau.domain.repositories.i_course_repository import ICourseRepository
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class DeleteCourse:
    """Delete a course and its lessons on behalf of its owner."""

    def __init__(self, guard: AuthorizationGuard, course_repository: ICourseRepository):
        """
        Initialize use case with dependencies.

        Args:
            guard: Authorization guard
            course_repository: Repository for course persistence
        """
        self.guard = guard
        self.course_repository = course_repository

    async def execute(self, session: Optional[Session], course_id: UUID) -> str:
        """
        Execute course deletion.

        Args:
            session: Caller's session
            course_id: Course to delete

        Returns:
            Title of the deleted course

        Raises:
            NoSessionError / InvalidSessionError: If session check fails
            EntityNotFoundError: If course does not exist (or vanished
                between the ownership check and the delete)
            UnauthorizedError: If caller does not own the course
        """
        identity = self.guard.authenticate(session)

        course = await self.course_repository.get_by_id(course_id)
        if course is None:
            raise EntityNotFoundError("Course", str(course_id))
        self.guard.ensure_owner(identity, course.creator_wallet, resource="courses")

        deleted = await self.course_repository.delete_owned(
            course_id, course.creator_wallet
        )
        if not deleted:
            raise EntityNotFoundError("Course", str(course_id))

        logger.info(f"Course {course_id} deleted by {mask_address(identity)}")
        return course.title
