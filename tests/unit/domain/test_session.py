"""
Unit tests for Session entity.
"""

import dataclasses

import pytest

from sceau.domain.entities.session import SESSION_DURATION_MS, Session
from tests.helpers import FIXED_NOW, make_session


class TestSession:
    """Unit tests for Session entity."""

    def test_lifetime_is_24_hours(self):
        assert SESSION_DURATION_MS == 86_400_000

    def test_issue_sets_expiry(self):
        """Issued session expires exactly one lifetime after timestamp."""
        session = make_session(timestamp=FIXED_NOW)

        assert session.timestamp == FIXED_NOW
        assert session.expires_at == FIXED_NOW + SESSION_DURATION_MS

    def test_not_expired_at_expiry_instant(self):
        """Expiry is strict: now == expires_at is still valid."""
        session = make_session()

        assert not session.is_expired(session.expires_at)
        assert session.is_expired(session.expires_at + 1)

    def test_not_expired_before(self):
        session = make_session()

        assert not session.is_expired(FIXED_NOW)

    def test_immutable(self):
        """Sessions are replaced, never mutated."""
        session = make_session()

        with pytest.raises(dataclasses.FrozenInstanceError):
            session.signature = "0xother"

    def test_to_dict_uses_stored_field_names(self):
        """Stored shape has exactly five fields with camelCase expiresAt."""
        session = make_session()

        data = session.to_dict()

        assert set(data) == {"address", "signature", "message", "timestamp", "expiresAt"}
        assert data["expiresAt"] == session.expires_at

    def test_equality_by_value(self):
        assert make_session() == make_session()
        assert make_session() != make_session(timestamp=FIXED_NOW + 1)

    def test_issue_classmethod(self):
        session = Session.issue("addr", "sig", "msg", 10)

        assert session == Session("addr", "sig", "msg", 10, 10 + SESSION_DURATION_MS)
