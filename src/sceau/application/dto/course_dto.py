"""
Data Transfer Objects for course and profile use cases.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from sceau.domain.entities.course import Course
from sceau.domain.entities.creator_profile import CreatorProfile


@dataclass
class LessonInput:
    """Lesson fields supplied by the editor."""

    title: str
    youtube_url: str
    order_index: int = 0


@dataclass
class UpdateCourseCommand:
    """Command to update a course and replace its lessons."""

    course_id: UUID
    title: str
    description: Optional[str] = None
    lessons: List[LessonInput] = field(default_factory=list)


@dataclass
class UpdateProfileCommand:
    """Command to create or update a creator profile."""

    wallet_address: str
    display_name: str = ""
    avatar_url: str = ""
    about_me: str = ""
    website_url: str = ""
    twitter_handle: str = ""


@dataclass
class DashboardStats:
    """Aggregate counts shown on the creator dashboard."""

    total_courses: int
    total_lessons: int


@dataclass
class DashboardData:
    """Creator dashboard: profile, own courses and stats."""

    profile: Optional[CreatorProfile]
    courses: List[Course]
    stats: DashboardStats

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "profile": self.profile.to_dict() if self.profile else None,
            "courses": [course.to_dict() for course in self.courses],
            "stats": {
                "total_courses": self.stats.total_courses,
                "total_lessons": self.stats.total_lessons,
            },
        }
