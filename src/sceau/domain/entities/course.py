"""
Course and Lesson entities - Creator-owned tutorial content.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4


@dataclass
class Lesson:
    """
    Lesson entity - single video lesson inside a course.

    Ownership is inherited from the parent course.
    """

    course_id: UUID
    title: str
    youtube_url: str
    order_index: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate lesson data after initialization."""
        if not self.title or not self.title.strip():
            raise ValueError("Lesson title is required")
        if self.order_index < 0:
            raise ValueError("Lesson order_index cannot be negative")

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": str(self.id),
            "course_id": str(self.course_id),
            "title": self.title,
            "youtube_url": self.youtube_url,
            "order_index": self.order_index,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass
class Course:
    """
    Course entity - owned by the wallet that created it.

    creator_wallet is the only ownership fact the authorization checks
    trust; it is set from the authenticated identity on creation and
    never from client-supplied fields.
    """

    title: str
    creator_wallet: str
    description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    lessons: List[Lesson] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate course data after initialization."""
        if not self.title or not self.title.strip():
            raise ValueError("Course title is required")
        if not self.creator_wallet:
            raise ValueError("Creator wallet is required")

    def sorted_lessons(self) -> List[Lesson]:
        """Return lessons ordered by order_index."""
        return sorted(self.lessons, key=lambda lesson: lesson.order_index)

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "creator_wallet": self.creator_wallet,
            "lessons": [lesson.to_dict() for lesson in self.sorted_lessons()],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
