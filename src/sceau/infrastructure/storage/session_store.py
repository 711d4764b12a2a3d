"""
Session store - the current session of a client context, kept in two
places: a persistent local store and a cookie.

Write order is local store first, then cookie. On the client the local
store is authoritative: a read that finds the two diverged rewrites the
cookie from the local copy. When there is no local copy the cookie is
used (server context, or a local store that was wiped) and, if a local
store exists, copied back into it. Expired or undecodable sessions are
evicted from both places on read. Expiry is never checked on write.
"""

from typing import Optional

from sceau.domain.entities.session import Session
from sceau.domain.exceptions import SessionDecodeError
from sceau.domain.services.clock import Clock, now_ms
from sceau.domain.services.i_session_store import (
    ICookieStorage,
    IKeyValueStorage,
    ISessionStore,
)
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.auth.session_codec import SessionCodec
from sceau.infrastructure.monitoring.logger import get_logger, mask_address

logger = get_logger(__name__)


class SessionStore(ISessionStore):
    """
    Dual-location session store for one wallet scheme.

    Single writer, single reader per client context; no locking.
    Concurrent writers (e.g. two processes sharing a storage file) are
    last-write-wins.
    """

    def __init__(
        self,
        scheme: WalletScheme,
        local: Optional[IKeyValueStorage] = None,
        cookies: Optional[ICookieStorage] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize session store.

        Args:
            scheme: Wallet scheme (selects the storage key)
            local: Persistent local store (None in server contexts)
            cookies: Cookie storage (None when no cookie jar exists)
            clock: Millisecond clock (defaults to wall clock)
        """
        self.scheme = scheme
        self.local = local
        self.cookies = cookies
        self.clock = clock or now_ms

    @property
    def key(self) -> str:
        """Storage key and cookie name."""
        return self.scheme.session_key

    @property
    def _cookie_writable(self) -> bool:
        return self.cookies is not None and not self.cookies.read_only

    def get(self) -> Optional[Session]:
        """
        Return the current session, evicting it if expired or malformed.

        Returns:
            Session or None
        """
        local_raw = self.local.get_item(self.key) if self.local else None
        cookie_raw = self.cookies.get_cookie(self.key) if self.cookies else None

        raw = local_raw or cookie_raw
        if not raw:
            return None

        try:
            session = SessionCodec.decode(raw)
        except SessionDecodeError as e:
            logger.error(f"Discarding unreadable {self.key}: {e}")
            self.clear()
            return None

        if session.is_expired(self.clock()):
            logger.info(
                f"Session expired for {mask_address(session.address)}, clearing"
            )
            self.clear()
            return None

        self._reconcile(raw, local_raw, cookie_raw, session)
        return session

    def set(self, session: Session) -> None:
        """
        Store session in both locations, replacing any previous one.

        Args:
            session: Session to store
        """
        raw = SessionCodec.encode(session)

        if self.local is not None:
            self.local.set_item(self.key, raw)

        if self._cookie_writable:
            self.cookies.set_cookie(self.key, raw, session.expires_at)
        elif self.cookies is not None:
            logger.debug(f"Cookie storage is read-only, {self.key} not written")

    def clear(self) -> None:
        """Remove the session from both locations."""
        if self.local is not None:
            self.local.remove_item(self.key)
        if self._cookie_writable:
            self.cookies.clear_cookie(self.key)

    def _reconcile(
        self,
        raw: str,
        local_raw: Optional[str],
        cookie_raw: Optional[str],
        session: Session,
    ) -> None:
        """Bring the two locations back in step after a divergent read."""
        if local_raw and cookie_raw != local_raw and self._cookie_writable:
            logger.info(f"Repairing {self.key} cookie from local store")
            self.cookies.set_cookie(self.key, raw, session.expires_at)
        elif not local_raw and self.local is not None:
            logger.info(f"Restoring {self.key} into local store from cookie")
            self.local.set_item(self.key, raw)
