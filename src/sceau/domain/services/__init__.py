"""
Domain services and service interfaces.
"""

from sceau.domain.services.challenge_message import (
    build_message,
    format_iso_millis,
    matches_challenge,
)
from sceau.domain.services.clock import Clock, now_ms
from sceau.domain.services.i_session_store import (
    ICookieStorage,
    IKeyValueStorage,
    ISessionStore,
)
from sceau.domain.services.i_session_verifier import ISessionVerifier
from sceau.domain.services.i_signature_provider import ISignatureProvider

__all__ = [
    "build_message",
    "format_iso_millis",
    "matches_challenge",
    "Clock",
    "now_ms",
    "ISessionStore",
    "IKeyValueStorage",
    "ICookieStorage",
    "ISessionVerifier",
    "ISignatureProvider",
]
