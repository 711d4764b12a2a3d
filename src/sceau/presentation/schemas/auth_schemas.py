"""
Authentication API schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# ================================================================
# Challenge Schemas
# ================================================================


class ChallengeResponse(BaseModel):
    """Message a wallet must sign to open a session."""

    address: str = Field(..., description="Normalized wallet address")
    scheme: str = Field(..., description="Wallet scheme (ethereum, solana)")
    timestamp: int = Field(..., description="Issuance time (ms since epoch)")
    expires_at: int = Field(..., description="Expiry time (ms since epoch)")
    message: str = Field(..., description="Exact message to sign")


# ================================================================
# Session Schemas
# ================================================================


class SessionSchema(BaseModel):
    """Stored session as sent by a client."""

    model_config = ConfigDict(populate_by_name=True)

    address: str = Field(..., description="Signer wallet address")
    signature: str = Field(..., description="Signature (0x-hex or base64)")
    message: str = Field(..., description="Message that was signed")
    timestamp: int = Field(..., description="Issuance time (ms since epoch)")
    expires_at: int = Field(
        ..., alias="expiresAt", description="Expiry time (ms since epoch)"
    )


class VerifySessionResponse(BaseModel):
    """Result of verifying a posted session."""

    valid: bool = Field(..., description="Session verifies for its address")
    address: Optional[str] = Field(None, description="Normalized address if valid")


class SessionIdentityResponse(BaseModel):
    """Identity bound to the caller's session."""

    address: str = Field(..., description="Authenticated wallet address")
    scheme: str = Field(..., description="Wallet scheme")
    expires_at: int = Field(..., description="Session expiry (ms since epoch)")
