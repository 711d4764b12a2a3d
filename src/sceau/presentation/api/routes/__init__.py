"""API routes."""
from sceau.presentation.api.routes import auth, courses, health, profiles

__all__ = [
    "auth",
    "courses",
    "health",
    "profiles",
]
