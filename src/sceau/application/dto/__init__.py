"""
Application DTOs.
"""

from sceau.application.dto.course_dto import (
    DashboardData,
    DashboardStats,
    LessonInput,
    UpdateCourseCommand,
    UpdateProfileCommand,
)

__all__ = [
    "DashboardData",
    "DashboardStats",
    "LessonInput",
    "UpdateCourseCommand",
    "UpdateProfileCommand",
]
