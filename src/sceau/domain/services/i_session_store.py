"""
Session store and storage backend interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from sceau.domain.entities.session import Session


class ISessionStore(ABC):
    """Persistence of the single current session of a client context."""

    @abstractmethod
    def get(self) -> Optional[Session]:
        """Return the current unexpired session, or None."""

    @abstractmethod
    def set(self, session: Session) -> None:
        """Store session, replacing any previous one unconditionally."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the session from every storage location."""


class IKeyValueStorage(ABC):
    """Persistent string key-value storage (localStorage analogue)."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return stored value or None."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present."""


class ICookieStorage(ABC):
    """Cookie storage readable by server-side request handlers."""

    read_only: bool = False

    @abstractmethod
    def get_cookie(self, name: str) -> Optional[str]:
        """Return decoded cookie value or None."""

    @abstractmethod
    def set_cookie(self, name: str, value: str, expires_at_ms: int) -> None:
        """Set cookie with path=/, SameSite=Lax and given expiry."""

    @abstractmethod
    def clear_cookie(self, name: str) -> None:
        """Expire the cookie."""
