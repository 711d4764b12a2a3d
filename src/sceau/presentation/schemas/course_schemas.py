"""
Course and lesson API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class LessonRequest(BaseModel):
    """Lesson fields in a course update."""

    title: str = Field(..., min_length=1, max_length=255)
    youtube_url: str = Field(..., max_length=500)
    order_index: int = Field(default=0, ge=0)


class CreateCourseRequest(BaseModel):
    """Request to create a course."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)


class UpdateCourseRequest(BaseModel):
    """Request to update a course and replace its lessons."""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    lessons: List[LessonRequest] = Field(default_factory=list)


class LessonResponse(BaseModel):
    """Lesson details."""

    id: str
    course_id: str
    title: str
    youtube_url: str
    order_index: int
    created_at: datetime
    updated_at: datetime


class CourseResponse(BaseModel):
    """Course details with ordered lessons."""

    id: str
    title: str
    description: Optional[str] = None
    creator_wallet: str
    lessons: List[LessonResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class DeleteCourseResponse(BaseModel):
    """Result of course deletion."""

    deleted: bool = True
    title: str = Field(..., description="Title of the deleted course")
