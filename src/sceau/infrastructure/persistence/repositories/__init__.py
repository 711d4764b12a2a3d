"""
SQLAlchemy repository implementations.
"""

from sceau.infrastructure.persistence.repositories.course_repository import (
    CourseRepository,
)
from sceau.infrastructure.persistence.repositories.lesson_repository import (
    LessonRepository,
)
from sceau.infrastructure.persistence.repositories.profile_repository import (
    ProfileRepository,
)

__all__ = [
    "CourseRepository",
    "LessonRepository",
    "ProfileRepository",
]
