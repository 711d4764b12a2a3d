"""
Create Course use case.
"""

from typing import Optional

from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.domain.entities.course import Course
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import ValidationError
from sceau.domain.repositories.i_course_repository import ICourseRepository
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class CreateCourse:
    """
    Create a course owned by the authenticated wallet.

    Business rules:
    - Title is required (trimmed)
    - Empty description is stored as None
    - creator_wallet comes from the verified session only
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
        title: str,
        description: Optional[str] = None,
    ) -> Course:
        """
        Execute course creation.

        Args:
            session: Caller's session
            title: Course title
            description: Optional course description

        Returns:
            Created Course entity

        Raises:
            NoSessionError / InvalidSessionError: If session check fails
            ValidationError: If title is empty
        """
        creator_wallet = self.guard.authenticate(session)

        if not title or not title.strip():
            raise ValidationError(field="title", reason="Course title is required")

        course = Course(
            title=title.strip(),
            description=(description or "").strip() or None,
            creator_wallet=creator_wallet,
        )
        created = await self.course_repository.create(course)

        logger.info(f"Course {created.id} created by {mask_address(creator_wallet)}")
        return created
