"""
Update Course use case.
"""

from typing import Optional

from sceau.application.dto.course_dto import UpdateCourseCommand
from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.domain.entities.course import Course, Lesson
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import EntityNotFoundError, ValidationError
from sceau.domain.repositories.i_course_repository import ICourseRepository
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class UpdateCourse:
    """
    Update a course and replace its lesson list.

    Business rules:
    - Ownership is checked against the stored creator before any write
    - The write itself is conditional on the same owner; if it matches
      nothing (course deleted concurrently) the operation reports
      not found
    """

    def __init__(self, guard: AuthorizationGuard, course_repository: ICourseRepository):
        """
        Initialize use case with dependencies.

        Args:
            guard: Authorization guard
            course_repository: Repository for course persistence
        """
        self.guard = guard
        self.course_repository = course_repository

    async def execute(
        self,
        session: Optional[Session],
        command: UpdateCourseCommand,
    ) -> Course:
        """
        Execute course update.

        Args:
            session: Caller's session
            command: New course fields and lessons

        Returns:
            Updated Course entity

        Raises:
            NoSessionError / InvalidSessionError: If session check fails
            ValidationError: If title or a lesson title is empty
            EntityNotFoundError: If course does not exist
            UnauthorizedError: If caller does not own the course
        """
        identity = self.guard.authenticate(session)

        if not command.title or not command.title.strip():
            raise ValidationError(field="title", reason="Course title is required")

        owner = await self.course_repository.get_owner(command.course_id)
        if owner is None:
            raise EntityNotFoundError("Course", str(command.course_id))
        self.guard.ensure_owner(identity, owner, resource="courses")

        try:
            lessons = [
                Lesson(
                    course_id=command.course_id,
                    title=lesson.title.strip(),
                    youtube_url=lesson.youtube_url.strip(),
                    order_index=lesson.order_index,
                )
                for lesson in command.lessons
            ]
        except ValueError as e:
            raise ValidationError(field="lessons", reason=str(e))

        updated = await self.course_repository.update_owned(
            course_id=command.course_id,
            owner=owner,
            title=command.title.strip(),
            description=(command.description or "").strip() or None,
            lessons=lessons,
        )
        if not updated:
            raise EntityNotFoundError("Course", str(command.course_id))

        course = await self.course_repository.get_by_id(command.course_id)
        if course is None:
            raise EntityNotFoundError("Course", str(command.course_id))

        logger.info(
            f"Course {command.course_id} updated by {mask_address(identity)} "
            f"({len(lessons)} lessons)"
        )
        return course
