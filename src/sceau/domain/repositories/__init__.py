"""
Repository interfaces.
"""

from sceau.domain.repositories.i_course_repository import ICourseRepository
from sceau.domain.repositories.i_lesson_repository import ILessonRepository
from sceau.domain.repositories.i_profile_repository import IProfileRepository

__all__ = [
    "ICourseRepository",
    "ILessonRepository",
    "IProfileRepository",
]
