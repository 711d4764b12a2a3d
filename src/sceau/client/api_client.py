"""
Sceau HTTP client.

Holds the client side of a wallet session: signs in with a wallet,
keeps the session in a local file and in the cookie jar of its httpx
client, and calls the privileged API with that cookie attached.

Examples:
    signer = EthereumKeySigner.generate()
    async with SceauClient("http://localhost:8000", WalletScheme.ETHEREUM) as client:
        await client.login(signer, signer.address)
        course = await client.create_course("Intro", "First course")
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from uuid import UUID

import httpx

from sceau.config.settings import get_settings
from sceau.application.use_cases.authenticate_wallet import AuthenticateWallet
from sceau.application.use_cases.session_lifecycle import Logout, RestoreSession
from sceau.domain.entities.session import Session
from sceau.domain.exceptions import SceauException
from sceau.domain.services.clock import Clock
from sceau.domain.services.i_session_store import ISessionStore
from sceau.domain.services.i_signature_provider import ISignatureProvider
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.auth import verifier_for
from sceau.infrastructure.monitoring.logger import get_logger
from sceau.infrastructure.storage.cookie_storage import HttpxCookieStorage
from sceau.infrastructure.storage.key_value_storage import FileKeyValueStorage
from sceau.infrastructure.storage.session_store import SessionStore

logger = get_logger(__name__)

STORAGE_FILE_NAME = "sessions.json"


class SceauClient:
    """
    Async client for the Sceau API.

    Attributes:
        base_url: API base URL
        scheme: Wallet scheme of this client
        session_store: Store shared with the login flow
        http: Underlying httpx client (its cookie jar carries the session)
    """

    def __init__(
        self,
        base_url: str,
        scheme: WalletScheme = WalletScheme.ETHEREUM,
        session_store: Optional[ISessionStore] = None,
        storage_dir: Optional[str] = None,
        strict_verification: bool = False,
        clock: Optional[Clock] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            base_url: API base URL (e.g. "http://localhost:8000")
            scheme: Wallet scheme used to sign in
            session_store: Custom session store (built from storage_dir
                           and the cookie jar if None)
            storage_dir: Directory for the local session file
                         (defaults to SESSION_STORAGE_DIR)
            strict_verification: Verify restored Solana sessions with Ed25519
            clock: Millisecond clock override
            timeout: HTTP timeout in seconds
            transport: Custom httpx transport (e.g. ASGITransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.scheme = scheme
        self.clock = clock

        self.http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"X-Wallet-Scheme": scheme.value},
        )

        if session_store is None:
            storage_dir = storage_dir or get_settings().SESSION_STORAGE_DIR
            directory = Path(storage_dir).expanduser()
            session_store = SessionStore(
                scheme=scheme,
                local=FileKeyValueStorage(directory / STORAGE_FILE_NAME),
                cookies=HttpxCookieStorage(self.http.cookies),
                clock=clock,
            )
        self.session_store = session_store

        self._authenticate = AuthenticateWallet(
            session_store=self.session_store,
            scheme=scheme,
            clock=clock,
        )
        self._restore = RestoreSession(
            session_store=self.session_store,
            verifier=verifier_for(scheme, strict=strict_verification, clock=clock),
        )
        self._logout = Logout(session_store=self.session_store)

        logger.debug(f"SceauClient initialized: {self.base_url} ({scheme.value})")

    async def __aenter__(self) -> "SceauClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client. The stored session is kept."""
        await self.http.aclose()

    # ================================================================
    # Session lifecycle
    # ================================================================

    async def login(self, signer: Optional[ISignatureProvider], address: str) -> Session:
        """
        Sign the challenge with the wallet and store the new session.

        Raises:
            AuthenticationError: If the wallet is missing, refuses or fails
            ValidationError: If the address is malformed
        """
        return await self._authenticate.execute(signer, address)

    def logout(self) -> None:
        """Forget the session locally and in the cookie jar."""
        self._logout.execute()

    def current_session(self) -> Optional[Session]:
        """Stored session if present, unexpired and verifiable."""
        return self._restore.execute()

    # ================================================================
    # Auth API
    # ================================================================

    async def get_challenge(self, address: str) -> Dict[str, Any]:
        """Server preview of the message to sign."""
        return await self._request(
            "GET",
            "/api/auth/challenge",
            params={"address": address, "scheme": self.scheme.value},
        )

    async def verify_session(self, session: Session) -> bool:
        """Ask the server whether a session verifies."""
        data = await self._request("POST", "/api/auth/verify", json=session.to_dict())
        return bool(data["valid"])

    async def whoami(self) -> Dict[str, Any]:
        """Identity bound to the current session cookie."""
        return await self._request("GET", "/api/auth/session")

    # ================================================================
    # Courses
    # ================================================================

    async def create_course(
        self, title: str, description: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/api/courses",
            json={"title": title, "description": description},
        )

    async def get_course(self, course_id: UUID) -> Dict[str, Any]:
        return await self._request("GET", f"/api/courses/{course_id}")

    async def update_course(
        self,
        course_id: UUID,
        title: str,
        description: Optional[str] = None,
        lessons: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """
        Update a course; lessons replace the existing list.

        Args:
            course_id: Course to update
            title: New title
            description: New description
            lessons: Dicts with title, youtube_url, order_index
        """
        return await self._request(
            "PUT",
            f"/api/courses/{course_id}",
            json={
                "title": title,
                "description": description,
                "lessons": lessons or [],
            },
        )

    async def delete_course(self, course_id: UUID) -> str:
        """Delete a course; returns its title."""
        data = await self._request("DELETE", f"/api/courses/{course_id}")
        return data["title"]

    async def delete_lesson(self, lesson_id: UUID) -> None:
        await self._request("DELETE", f"/api/lessons/{lesson_id}")

    # ================================================================
    # Profiles
    # ================================================================

    async def get_profile(self, wallet_address: str) -> Optional[Dict[str, Any]]:
        """Public profile, or None if the wallet has none."""
        try:
            return await self._request("GET", f"/api/profiles/{wallet_address}")
        except SceauApiError as e:
            if e.code == "ENTITY_NOT_FOUND":
                return None
            raise

    async def update_profile(self, wallet_address: str, **fields: str) -> Dict[str, Any]:
        """
        Create or update own profile.

        Args:
            wallet_address: Own wallet address
            **fields: display_name, avatar_url, about_me, website_url,
                      twitter_handle
        """
        return await self._request(
            "PUT", f"/api/profiles/{wallet_address}", json=fields
        )

    async def get_dashboard(self) -> Dict[str, Any]:
        return await self._request("GET", "/api/dashboard")

    # ================================================================
    # Transport
    # ================================================================

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self.http.request(method, path, **kwargs)

        if response.status_code == 204:
            return None
        if response.is_success:
            return response.json()

        raise self._error_from_response(response)

    def _error_from_response(self, response: httpx.Response) -> "SceauApiError":
        try:
            body = response.json()
        except ValueError:
            body = {}

        error = SceauApiError(
            status_code=response.status_code,
            code=body.get("error") or f"HTTP_{response.status_code}",
            message=body.get("message") or response.text,
            reauthenticate=bool(body.get("reauthenticate")),
        )

        if error.requires_reauthentication:
            logger.info(f"Server rejected session ({error.code}), signing out")
            self.logout()

        return error


class SceauApiError(SceauException):
    """Error response from the Sceau API, carrying the server's error code."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        reauthenticate: bool = False,
    ):
        super().__init__(message, code=code)
        self.status_code = status_code
        self.requires_reauthentication = reauthenticate
