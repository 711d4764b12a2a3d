"""
Lesson repository implementation.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from sceau.domain.repositories.i_lesson_repository import ILessonRepository
from sceau.infrastructure.persistence.models import CourseModel, LessonModel


class LessonRepository(ILessonRepository):
    """SQLAlchemy implementation of lesson repository."""

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_course_owner(self, lesson_id: UUID) -> Optional[str]:
        """Get creator wallet of the lesson's course."""
        stmt = (
            select(CourseModel.creator_wallet)
            .join(LessonModel, LessonModel.course_id == CourseModel.id)
            .where(LessonModel.id == lesson_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_owned(self, lesson_id: UUID, owner: str) -> bool:
        """Delete lesson if its course is owned by owner."""
        owned_courses = select(CourseModel.id).where(
            CourseModel.creator_wallet == owner
        )
        stmt = (
            delete(LessonModel)
            .where(
                LessonModel.id == lesson_id,
                LessonModel.course_id.in_(owned_courses),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
