"""
Creator profile and dashboard API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from sceau.presentation.schemas.course_schemas import CourseResponse


class UpdateProfileRequest(BaseModel):
    """Profile fields; blank values clear the field."""

    display_name: str = Field(default="", max_length=100)
    avatar_url: str = Field(default="", max_length=500)
    about_me: str = Field(default="", max_length=2000)
    website_url: str = Field(default="", max_length=500)
    twitter_handle: str = Field(default="", max_length=50)


class ProfileResponse(BaseModel):
    """Public creator profile."""

    id: str
    wallet_address: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    about_me: Optional[str] = None
    website_url: Optional[str] = None
    twitter_handle: Optional[str] = None
    is_verified: bool = False
    created_at: datetime
    updated_at: datetime


class DashboardStatsResponse(BaseModel):
    """Dashboard counters."""

    total_courses: int
    total_lessons: int


class DashboardResponse(BaseModel):
    """Creator dashboard."""

    profile: Optional[ProfileResponse] = None
    courses: List[CourseResponse] = Field(default_factory=list)
    stats: DashboardStatsResponse
