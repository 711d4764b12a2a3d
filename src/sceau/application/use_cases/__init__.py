"""
Application use cases.
"""

from sceau.application.use_cases.authenticate_wallet import AuthenticateWallet
from sceau.application.use_cases.create_course import CreateCourse
from sceau.application.use_cases.delete_course import DeleteCourse
from sceau.application.use_cases.delete_lesson import DeleteLesson
from sceau.application.use_cases.get_course_for_edit import GetCourseForEdit
from sceau.application.use_cases.get_dashboard_data import GetDashboardData
from sceau.application.use_cases.get_profile import GetProfile
from sceau.application.use_cases.session_lifecycle import Logout, RestoreSession
from sceau.application.use_cases.update_course import UpdateCourse
from sceau.application.use_cases.update_profile import UpdateProfile

__all__ = [
    "AuthenticateWallet",
    "CreateCourse",
    "DeleteCourse",
    "DeleteLesson",
    "GetCourseForEdit",
    "GetDashboardData",
    "GetProfile",
    "Logout",
    "RestoreSession",
    "UpdateCourse",
    "UpdateProfile",
]
