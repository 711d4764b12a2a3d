"""
Domain entities.
"""

from sceau.domain.entities.course import Course, Lesson
from sceau.domain.entities.creator_profile import CreatorProfile
from sceau.domain.entities.session import SESSION_DURATION_MS, Session

__all__ = [
    "Course",
    "Lesson",
    "CreatorProfile",
    "Session",
    "SESSION_DURATION_MS",
]
