"""
Session codec - durable string form of a Session.

Sessions are stored as compact JSON with exactly five top-level fields:
address, signature, message, timestamp, expiresAt. Cookie values carry
the same JSON percent-encoded like encodeURIComponent, so browser and
Python clients share one format.
"""

from urllib.parse import quote, unquote

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from sceau.domain.entities.session import Session
from sceau.domain.exceptions import SessionDecodeError

# Characters encodeURIComponent leaves untouched (besides alphanumerics)
_URI_COMPONENT_SAFE = "-_.!~*'()"


class SessionRecord(BaseModel):
    """Wire schema of a stored session."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: str
    signature: str
    message: str
    timestamp: int
    expires_at: int = Field(alias="expiresAt")


class SessionCodec:
    """Serialize and deserialize sessions."""

    @staticmethod
    def encode(session: Session) -> str:
        """
        Encode session as compact JSON.

        Args:
            session: Session to encode

        Returns:
            JSON string
        """
        record = SessionRecord(
            address=session.address,
            signature=session.signature,
            message=session.message,
            timestamp=session.timestamp,
            expires_at=session.expires_at,
        )
        return record.model_dump_json(by_alias=True)

    @staticmethod
    def decode(raw: str | bytes) -> Session:
        """
        Decode session from JSON.

        Args:
            raw: JSON string

        Returns:
            Session entity

        Raises:
            SessionDecodeError: If data is not a well-formed session
        """
        if not raw:
            raise SessionDecodeError("Empty session data")
        try:
            record = SessionRecord.model_validate_json(raw)
        except PydanticValidationError as e:
            raise SessionDecodeError(f"Malformed session data: {e}") from e

        return Session(
            address=record.address,
            signature=record.signature,
            message=record.message,
            timestamp=record.timestamp,
            expires_at=record.expires_at,
        )

    @staticmethod
    def from_dict(data: dict) -> Session:
        """
        Build session from an already-parsed JSON object.

        Raises:
            SessionDecodeError: If fields are missing or mistyped
        """
        try:
            record = SessionRecord.model_validate(data)
        except PydanticValidationError as e:
            raise SessionDecodeError(f"Malformed session data: {e}") from e

        return Session(
            address=record.address,
            signature=record.signature,
            message=record.message,
            timestamp=record.timestamp,
            expires_at=record.expires_at,
        )


def encode_cookie_value(value: str) -> str:
    """Percent-encode a cookie value the way encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def decode_cookie_value(value: str) -> str:
    """Reverse encode_cookie_value."""
    return unquote(value)
