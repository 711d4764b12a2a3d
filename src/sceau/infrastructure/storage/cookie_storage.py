"""
Cookie storage backends.

HttpxCookieStorage keeps the session cookie in an httpx cookie jar, so
every request the client sends carries it to the server. The cookie is
readable by scripts on purpose (no HttpOnly, no Secure): clients read it
back as a fallback when the local store is unavailable.
"""

from http.cookiejar import Cookie
from typing import Mapping, Optional

import httpx

from sceau.domain.services.i_session_store import ICookieStorage
from sceau.infrastructure.auth.session_codec import (
    decode_cookie_value,
    encode_cookie_value,
)
from sceau.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

COOKIE_PATH = "/"
COOKIE_SAME_SITE = "Lax"


class HttpxCookieStorage(ICookieStorage):
    """Cookie storage backed by an httpx.Cookies jar."""

    def __init__(self, cookies: Optional[httpx.Cookies] = None, domain: str = ""):
        """
        Initialize cookie storage.

        Args:
            cookies: Cookie jar to write into (new jar if None)
            domain: Cookie domain ("" matches any host)
        """
        self.cookies = cookies if cookies is not None else httpx.Cookies()
        self.domain = domain

    def get_cookie(self, name: str) -> Optional[str]:
        """Return decoded cookie value or None."""
        for cookie in self.cookies.jar:
            if cookie.name == name and cookie.path == COOKIE_PATH:
                if cookie.value is None:
                    return None
                return decode_cookie_value(cookie.value)
        return None

    def set_cookie(self, name: str, value: str, expires_at_ms: int) -> None:
        """Set cookie with path=/, SameSite=Lax and given expiry."""
        cookie = Cookie(
            version=0,
            name=name,
            value=encode_cookie_value(value),
            port=None,
            port_specified=False,
            domain=self.domain,
            domain_specified=bool(self.domain),
            domain_initial_dot=self.domain.startswith("."),
            path=COOKIE_PATH,
            path_specified=True,
            secure=False,
            expires=expires_at_ms // 1000,
            discard=False,
            comment=None,
            comment_url=None,
            rest={"SameSite": COOKIE_SAME_SITE},
            rfc2109=False,
        )
        self.cookies.jar.set_cookie(cookie)

    def clear_cookie(self, name: str) -> None:
        """Remove the cookie from the jar."""
        self.cookies.delete(name, path=COOKIE_PATH)


class RequestCookieStorage(ICookieStorage):
    """
    Read-only view of the cookies of an incoming request.

    Server-side handlers have no local store; they read the session the
    client placed in its cookie. Writes are not possible from here.
    """

    read_only = True

    def __init__(self, cookies: Mapping[str, str]):
        """
        Initialize from request cookies.

        Args:
            cookies: Parsed request cookies (e.g. request.cookies)
        """
        self._cookies = cookies

    def get_cookie(self, name: str) -> Optional[str]:
        """Return decoded cookie value or None."""
        value = self._cookies.get(name)
        return decode_cookie_value(value) if value else None

    def set_cookie(self, name: str, value: str, expires_at_ms: int) -> None:
        """Request cookies cannot be written; ignored."""
        logger.debug(f"Ignoring write to read-only request cookie {name}")

    def clear_cookie(self, name: str) -> None:
        """Request cookies cannot be cleared; ignored."""
        logger.debug(f"Ignoring clear of read-only request cookie {name}")
