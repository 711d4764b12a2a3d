"""
Course repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from sceau.domain.entities.course import Course, Lesson


class ICourseRepository(ABC):
    """Interface for course persistence operations."""

    @abstractmethod
    async def create(self, course: Course) -> Course:
        """
        Create new course.

        Args:
            course: Course entity to create

        Returns:
            Created course entity
        """

    @abstractmethod
    async def get_by_id(self, course_id: UUID) -> Optional[Course]:
        """
        Get course by ID, lessons included.

        Args:
            course_id: Course unique identifier

        Returns:
            Course entity if found, None otherwise
        """

    @abstractmethod
    async def get_owner(self, course_id: UUID) -> Optional[str]:
        """
        Get the stored creator wallet of a course.

        Args:
            course_id: Course unique identifier

        Returns:
            Creator wallet if course exists, None otherwise
        """

    @abstractmethod
    async def list_by_creator(self, creator_wallet: str) -> List[Course]:
        """
        List courses of a creator, newest first, lessons included.

        Args:
            creator_wallet: Owner wallet address

        Returns:
            List of course entities
        """

    @abstractmethod
    async def update_owned(
        self,
        course_id: UUID,
        owner: str,
        title: str,
        description: Optional[str],
        lessons: List[Lesson],
    ) -> bool:
        """
        Update a course and replace its lessons, only if owned by owner.

        The owner predicate is part of the same statement as the write.

        Returns:
            True if updated, False if no course matched (id, owner)
        """

    @abstractmethod
    async def delete_owned(self, course_id: UUID, owner: str) -> bool:
        """
        Delete a course and its lessons, only if owned by owner.

        Returns:
            True if deleted, False if no course matched (id, owner)
        """
