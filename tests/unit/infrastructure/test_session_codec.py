"""
Unit tests for SessionCodec and cookie value encoding.
"""

import json

import pytest

from sceau.domain.exceptions import SessionDecodeError
from sceau.infrastructure.auth.session_codec import (
    SessionCodec,
    decode_cookie_value,
    encode_cookie_value,
)
from tests.helpers import make_session


class TestSessionCodec:
    """Unit tests for SessionCodec."""

    # ================================================================
    # Encoding
    # ================================================================

    def test_encode_produces_five_fields(self):
        """Stored JSON has exactly the five session fields."""
        session = make_session()

        data = json.loads(SessionCodec.encode(session))

        assert data == {
            "address": session.address,
            "signature": session.signature,
            "message": session.message,
            "timestamp": session.timestamp,
            "expiresAt": session.expires_at,
        }

    def test_decode_restores_equal_session(self):
        session = make_session()

        assert SessionCodec.decode(SessionCodec.encode(session)) == session

    def test_decode_accepts_browser_json(self):
        """JSON written by another client with spaces still decodes."""
        raw = (
            '{"address": "0xabc", "signature": "0x1", "message": "m", '
            '"timestamp": 1, "expiresAt": 2}'
        )

        session = SessionCodec.decode(raw)

        assert session.address == "0xabc"
        assert session.expires_at == 2

    # ================================================================
    # Malformed input
    # ================================================================

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not json",
            "[]",
            '{"address": "0xabc"}',
            '{"address": "a", "signature": "s", "message": "m", '
            '"timestamp": "soon", "expiresAt": 2}',
        ],
    )
    def test_decode_rejects_malformed(self, raw):
        with pytest.raises(SessionDecodeError):
            SessionCodec.decode(raw)

    def test_from_dict(self):
        session = make_session()

        assert SessionCodec.from_dict(session.to_dict()) == session

    def test_from_dict_rejects_missing_fields(self):
        with pytest.raises(SessionDecodeError):
            SessionCodec.from_dict({"address": "0xabc"})


class TestCookieValue:
    """Cookie values use encodeURIComponent escaping."""

    def test_escapes_json_and_newlines(self):
        encoded = encode_cookie_value('{"message": "a b\\nc"}')

        assert encoded == "%7B%22message%22%3A%20%22a%20b%5Cnc%22%7D"

    def test_keeps_unreserved_characters(self):
        assert encode_cookie_value("a-_.!~*'()") == "a-_.!~*'()"

    def test_decode_reverses_encode(self):
        raw = make_session().to_dict()["message"]

        assert decode_cookie_value(encode_cookie_value(raw)) == raw
