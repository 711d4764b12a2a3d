"""
Application services.
"""

from sceau.application.services.authorization_guard import AuthorizationGuard

__all__ = ["AuthorizationGuard"]
