"""
Dependency Injection module for Sceau.

Provides container and dependency functions for FastAPI routes.
"""

from sceau.di.container import (
    DIContainer,
    get_container,
    initialize_container,
    reset_container,
    shutdown_container,
)
from sceau.di.dependencies import (
    get_create_course,
    get_db_session,
    get_delete_course,
    get_delete_lesson,
    get_get_course_for_edit,
    get_get_dashboard_data,
    get_get_profile,
    get_guard,
    get_update_course,
    get_update_profile,
    get_verifier,
    get_wallet_scheme,
)

__all__ = [
    # Container
    "DIContainer",
    "get_container",
    "initialize_container",
    "reset_container",
    "shutdown_container",
    # Dependencies
    "get_db_session",
    "get_wallet_scheme",
    "get_guard",
    "get_verifier",
    "get_create_course",
    "get_get_course_for_edit",
    "get_update_course",
    "get_delete_course",
    "get_delete_lesson",
    "get_update_profile",
    "get_get_profile",
    "get_get_dashboard_data",
]
