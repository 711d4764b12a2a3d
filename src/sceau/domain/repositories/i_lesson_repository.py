"""
Lesson repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class ILessonRepository(ABC):
    """Interface for lesson persistence operations."""

    @abstractmethod
    async def get_course_owner(self, lesson_id: UUID) -> Optional[str]:
        """
        Get the creator wallet of the course a lesson belongs to.

        Args:
            lesson_id: Lesson unique identifier

        Returns:
            Creator wallet if lesson exists, None otherwise
        """

    @abstractmethod
    async def delete_owned(self, lesson_id: UUID, owner: str) -> bool:
        """
        Delete a lesson only if its course is owned by owner.

        Returns:
            True if deleted, False if nothing matched
        """
