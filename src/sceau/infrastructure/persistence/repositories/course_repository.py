"""
Course repository implementation.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from sceau.domain.entities.course import Course, Lesson
from sceau.domain.repositories.i_course_repository import ICourseRepository
from sceau.infrastructure.persistence.models import CourseModel, LessonModel


class CourseRepository(ICourseRepository):
    """
    SQLAlchemy implementation of course repository.

    Mutations carry the owner predicate in their WHERE clause, so an
    ownership change or deletion racing with the write makes the write
    match nothing instead of touching another creator's course.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, course: Course) -> Course:
        """
        Create new course with its lessons.

        Args:
            course: Course entity to create

        Returns:
            Created course entity
        """
        model = CourseModel(
            id=course.id,
            title=course.title,
            description=course.description,
            creator_wallet=course.creator_wallet,
            created_at=course.created_at,
            updated_at=course.updated_at,
        )
        self.session.add(model)
        for lesson in course.lessons:
            self.session.add(self._lesson_model(lesson, course.id))

        await self.session.flush()
        return await self.get_by_id(course.id)

    async def get_by_id(self, course_id: UUID) -> Optional[Course]:
        """Get course by ID with lessons."""
        stmt = (
            select(CourseModel)
            .where(CourseModel.id == course_id)
            .options(selectinload(CourseModel.lessons))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_owner(self, course_id: UUID) -> Optional[str]:
        """Get stored creator wallet of a course."""
        stmt = select(CourseModel.creator_wallet).where(CourseModel.id == course_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_creator(self, creator_wallet: str) -> List[Course]:
        """List courses of a creator, newest first."""
        stmt = (
            select(CourseModel)
            .where(CourseModel.creator_wallet == creator_wallet)
            .options(selectinload(CourseModel.lessons))
            .order_by(CourseModel.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def update_owned(
        self,
        course_id: UUID,
        owner: str,
        title: str,
        description: Optional[str],
        lessons: List[Lesson],
    ) -> bool:
        """
        Update course fields and replace lessons if owned by owner.

        Returns:
            True if updated, False if (id, owner) matched nothing
        """
        stmt = (
            update(CourseModel)
            .where(CourseModel.id == course_id, CourseModel.creator_wallet == owner)
            .values(title=title, description=description, updated_at=datetime.now())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return False

        await self.session.execute(
            delete(LessonModel)
            .where(LessonModel.course_id == course_id)
            .execution_options(synchronize_session=False)
        )
        for lesson in lessons:
            self.session.add(self._lesson_model(lesson, course_id))

        await self.session.flush()
        return True

    async def delete_owned(self, course_id: UUID, owner: str) -> bool:
        """
        Delete course and its lessons if owned by owner.

        Returns:
            True if deleted, False if (id, owner) matched nothing
        """
        owned_course = select(CourseModel.id).where(
            CourseModel.id == course_id, CourseModel.creator_wallet == owner
        )

        # Lessons first (foreign key)
        await self.session.execute(
            delete(LessonModel)
            .where(LessonModel.course_id.in_(owned_course))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(
            delete(CourseModel)
            .where(CourseModel.id == course_id, CourseModel.creator_wallet == owner)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    @staticmethod
    def _lesson_model(lesson: Lesson, course_id: UUID) -> LessonModel:
        """Convert lesson entity to database model."""
        return LessonModel(
            id=lesson.id,
            course_id=course_id,
            title=lesson.title,
            youtube_url=lesson.youtube_url,
            order_index=lesson.order_index,
            created_at=lesson.created_at,
            updated_at=lesson.updated_at,
        )

    @staticmethod
    def _to_entity(model: CourseModel) -> Course:
        """Convert database model to domain entity."""
        return Course(
            id=model.id,
            title=model.title,
            description=model.description,
            creator_wallet=model.creator_wallet,
            lessons=[
                Lesson(
                    id=lesson.id,
                    course_id=lesson.course_id,
                    title=lesson.title,
                    youtube_url=lesson.youtube_url,
                    order_index=lesson.order_index,
                    created_at=lesson.created_at,
                    updated_at=lesson.updated_at,
                )
                for lesson in model.lessons
            ],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
