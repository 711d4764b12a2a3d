"""
Session extraction for FastAPI routes.

The client stores its session in a cookie named after the scheme's
session key; clients without a cookie jar may send the same JSON in the
X-Wallet-Session header. Extraction only decodes; trust comes from the
AuthorizationGuard each use case runs.
"""

from typing import Optional

from fastapi import Depends, Header, Request

from sceau.di.dependencies import get_wallet_scheme
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import SessionDecodeError
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.auth.session_codec import SessionCodec
from sceau.infrastructure.monitoring.logger import get_logger
from sceau.infrastructure.storage.cookie_storage import RequestCookieStorage

logger = get_logger(__name__)


def _decode(raw: Optional[str], source: str) -> Optional[Session]:
    if not raw:
        return None
    try:
        return SessionCodec.decode(raw)
    except SessionDecodeError as e:
        logger.info(f"Ignoring malformed session {source}: {e}")
        return None


async def get_current_session(
    request: Request,
    scheme: WalletScheme = Depends(get_wallet_scheme),
    x_wallet_session: Optional[str] = Header(default=None),
) -> Optional[Session]:
    """
    Extract the caller's session, if any.

    Expired sessions are returned as-is so the guard reports them as
    invalid rather than missing.

    Args:
        request: Incoming request (cookies)
        scheme: Wallet scheme of the request
        x_wallet_session: Session JSON header fallback

    Returns:
        Decoded Session or None
    """
    cookies = RequestCookieStorage(request.cookies)
    session = _decode(cookies.get_cookie(scheme.session_key), "cookie")
    if session is None:
        session = _decode(x_wallet_session, "header")
    return session

