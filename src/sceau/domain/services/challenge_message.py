"""
Challenge message builder.

The message is shown to the user in the wallet's signing prompt and is
stored verbatim in the session. Its exact wording and field order are
part of the wire contract: verification re-derives the signer from these
exact bytes.
"""

from datetime import datetime, timedelta, timezone

from sceau.domain.entities.session import SESSION_DURATION_MS, Session
from sceau.domain.value_objects.wallet_scheme import WalletScheme

APP_NAME = "Tutorial Platform"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

HEADING = f"Sign this message to authenticate with {APP_NAME}."


def format_iso_millis(timestamp_ms: int) -> str:
    """
    Format epoch milliseconds as ISO-8601 UTC with millisecond precision.

    Matches JavaScript's Date.prototype.toISOString(),
    e.g. 1700086400000 -> "2023-11-15T22:13:20.000Z".
    """
    moment = _EPOCH + timedelta(milliseconds=timestamp_ms)
    return (
        moment.strftime("%Y-%m-%dT%H:%M:%S")
        + f".{moment.microsecond // 1000:03d}Z"
    )


def build_message(address: str, timestamp_ms: int) -> str:
    """
    Build the canonical challenge string for a wallet to sign.

    Pure function of its arguments.

    Args:
        address: Normalized wallet address
        timestamp_ms: Issuance time (ms since epoch)

    Returns:
        Challenge message string
    """
    expires_at = timestamp_ms + SESSION_DURATION_MS
    return (
        f"{HEADING}\n"
        "\n"
        f"Address: {address}\n"
        f"Timestamp: {timestamp_ms}\n"
        f"Expires: {format_iso_millis(expires_at)}\n"
        "\n"
        "This signature will be valid for 24 hours."
    )


def matches_challenge(session: Session, scheme: WalletScheme) -> bool:
    """
    Check that a session's plain fields agree with its signed message.

    Only the message is covered by the signature; timestamp and
    expires_at are trusted only when the message rebuilt from them is
    identical and the lifetime is the fixed session duration.

    Args:
        session: Session to check
        scheme: Wallet scheme (address normalisation)

    Returns:
        True if the message is the challenge for address and timestamp
    """
    if session.expires_at != session.timestamp + SESSION_DURATION_MS:
        return False
    address = scheme.normalize_address(session.address)
    return session.message == build_message(address, session.timestamp)
