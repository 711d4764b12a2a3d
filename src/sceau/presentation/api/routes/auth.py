"""
Authentication API routes.

Wallet sessions are created client-side: the wallet signs the challenge
message and the client stores the resulting session. The server only
previews challenges and verifies presented sessions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from sceau.application.services.authorization_guard import AuthorizationGuard
from sceau.di.dependencies import get_guard, get_verifier, get_wallet_scheme
from sceau.domain.entities.session import SESSION_DURATION_MS, Session
from sceau.domain.exceptions import ValidationError
from sceau.domain.services.challenge_message import build_message
from sceau.domain.services.clock import now_ms
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.domain.value_objects.wallet_address import WalletAddress
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.monitoring.logger import get_logger, mask_address
from sceau.presentation.api.middleware.session import get_current_session
from sceau.presentation.schemas.auth_schemas import (
    ChallengeResponse,
    SessionIdentityResponse,
    SessionSchema,
    VerifySessionResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = get_logger(__name__)


# ================================================================
# Challenge
# ================================================================


@router.get(
    "/challenge",
    response_model=ChallengeResponse,
    summary="Preview the message to sign",
)
async def get_challenge(
    address: str = Query(..., description="Wallet address"),
    scheme: Optional[str] = Query(None, description="Wallet scheme override"),
    request_scheme: WalletScheme = Depends(get_wallet_scheme),
) -> ChallengeResponse:
    """
    Build the challenge message for an address at the current time.

    Raises:
        ValidationError: If scheme or address is invalid
    """
    try:
        wallet_scheme = WalletScheme.parse(scheme) if scheme else request_scheme
        wallet = WalletAddress(address, wallet_scheme)
    except ValueError as e:
        raise ValidationError("address", str(e)) from e

    timestamp = now_ms()
    return ChallengeResponse(
        address=wallet.address,
        scheme=wallet_scheme.value,
        timestamp=timestamp,
        expires_at=timestamp + SESSION_DURATION_MS,
        message=build_message(wallet.address, timestamp),
    )


# ================================================================
# Verify Session
# ================================================================


@router.post(
    "/verify",
    response_model=VerifySessionResponse,
    summary="Verify a session",
    description="Returns valid=false for sessions that fail verification",
)
async def verify_session(
    request: SessionSchema,
    scheme: WalletScheme = Depends(get_wallet_scheme),
    verifier: ISessionVerifier = Depends(get_verifier),
) -> VerifySessionResponse:
    """Check a posted session without requiring it to be the caller's own."""
    session = Session(
        address=request.address,
        signature=request.signature,
        message=request.message,
        timestamp=request.timestamp,
        expires_at=request.expires_at,
    )
    valid = verifier.verify(session)
    logger.debug(f"Session for {mask_address(session.address)} valid={valid}")

    return VerifySessionResponse(
        valid=valid,
        address=scheme.normalize_address(session.address) if valid else None,
    )


# ================================================================
# Current Session
# ================================================================


@router.get(
    "/session",
    response_model=SessionIdentityResponse,
    summary="Identity of the current session",
)
async def get_session_identity(
    session: Optional[Session] = Depends(get_current_session),
    scheme: WalletScheme = Depends(get_wallet_scheme),
    guard: AuthorizationGuard = Depends(get_guard),
) -> SessionIdentityResponse:
    """
    Resolve the caller's session into an identity.

    Raises:
        NoSessionError: If no session cookie or header was sent
        InvalidSessionError: If the session fails verification
    """
    identity = guard.authenticate(session)
    return SessionIdentityResponse(
        address=identity,
        scheme=scheme.value,
        expires_at=session.expires_at,
    )
