"""
Delete Lesson use case.
"""

from typing import Optional
from uuid import UUID

from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import EntityNotFoundError
from sceau.domain.repositories.i_lesson_repository import ILessonRepository
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class DeleteLesson:
    """Delete a single lesson; ownership comes from its course."""

    def __init__(self, guard: AuthorizationGuard, lesson_repository: ILessonRepository):
        self.guard = guard
        self.lesson_repository = lesson_repository

    async def execute(self, session: Optional[Session], lesson_id: UUID) -> None:
        """
        Execute lesson deletion.

        Raises:
            NoSessionError / InvalidSessionError: If session check fails
            EntityNotFoundError: If lesson does not exist
            UnauthorizedError: If caller does not own the lesson's course
        """
        identity = self.guard.authenticate(session)

        owner = await self.lesson_repository.get_course_owner(lesson_id)
        if owner is None:
            raise EntityNotFoundError("Lesson", str(lesson_id))
        self.guard.ensure_owner(identity, owner, resource="lessons")

        deleted = await self.lesson_repository.delete_owned(lesson_id, owner)
        if not deleted:
            raise EntityNotFoundError("Lesson", str(lesson_id))

        logger.info(f"Lesson {lesson_id} deleted by {mask_address(identity)}")
