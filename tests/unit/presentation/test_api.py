"""
API tests: auth endpoints, privileged course and profile routes, error
bodies and health.
"""

from uuid import uuid4

import pytest

from sceau.domain.entities.session import SESSION_DURATION_MS, Session
from sceau.domain.services.clock import now_ms
from sceau.infrastructure.auth.session_codec import SessionCodec, encode_cookie_value
from sceau.infrastructure.signing import EthereumKeySigner, SolanaKeypairSigner
from tests.helpers import FakeClock, session_header, sign_in


@pytest.fixture
def alice():
    return EthereumKeySigner.generate()


@pytest.fixture
def bob():
    return EthereumKeySigner.generate()


async def _create_course(api, headers, title="Intro to Solidity"):
    response = await api.post(
        "/api/courses",
        json={"title": title, "description": "Basics"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


class TestAuthRoutes:
    """Challenge preview, session verification, current identity."""

    async def test_challenge_ethereum(self, api):
        address = "0xABC0000000000000000000000000000000000001"

        response = await api.get("/api/auth/challenge", params={"address": address})

        data = response.json()
        assert response.status_code == 200
        assert data["address"] == address.lower()
        assert data["scheme"] == "ethereum"
        assert data["expires_at"] - data["timestamp"] == SESSION_DURATION_MS
        assert data["message"].startswith("Sign this message to authenticate with")
        assert address.lower() in data["message"]

    async def test_challenge_solana_keeps_case(self, api):
        address = SolanaKeypairSigner.generate().address

        response = await api.get(
            "/api/auth/challenge", params={"address": address, "scheme": "solana"}
        )

        assert response.status_code == 200
        assert response.json()["address"] == address
        assert response.json()["message"].startswith(
            "Sign this message to authenticate with Tutorial Platform."
        )

    async def test_challenge_bad_address(self, api):
        response = await api.get("/api/auth/challenge", params={"address": "nope"})

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"

    async def test_verify_valid(self, api, alice):
        session = await sign_in(alice)

        response = await api.post("/api/auth/verify", json=session.to_dict())

        assert response.json() == {"valid": True, "address": alice.address.lower()}

    async def test_verify_forged(self, api, alice, bob):
        session = await sign_in(alice)
        forged = session.to_dict()
        forged["address"] = bob.address.lower()

        response = await api.post("/api/auth/verify", json=forged)

        assert response.status_code == 200
        assert response.json() == {"valid": False, "address": None}

    async def test_session_identity_from_header(self, api, alice):
        session = await sign_in(alice)

        response = await api.get("/api/auth/session", headers=session_header(session))

        assert response.status_code == 200
        assert response.json()["address"] == alice.address.lower()
        assert response.json()["expires_at"] == session.expires_at

    async def test_session_identity_from_cookie(self, api, alice):
        session = await sign_in(alice)
        api.cookies.set("wallet_session", encode_cookie_value(SessionCodec.encode(session)))

        response = await api.get("/api/auth/session")

        assert response.status_code == 200
        assert response.json()["address"] == alice.address.lower()

    async def test_no_session(self, api):
        response = await api.get("/api/auth/session")

        assert response.status_code == 401
        assert response.json()["error"] == "NO_SESSION"
        assert response.json()["reauthenticate"] is True

    async def test_malformed_session_treated_as_missing(self, api):
        response = await api.get(
            "/api/auth/session", headers={"X-Wallet-Session": "{not json"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "NO_SESSION"

    async def test_expired_session_is_invalid(self, api, alice):
        session = await sign_in(alice, clock=FakeClock(now_ms() - 2 * SESSION_DURATION_MS))

        response = await api.get("/api/auth/session", headers=session_header(session))

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SESSION"
        assert response.json()["reauthenticate"] is True

    async def test_unknown_scheme_header(self, api):
        response = await api.get(
            "/api/auth/session", headers={"X-Wallet-Scheme": "bitcoin"}
        )

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestCourseRoutes:
    """Owner-only course and lesson operations."""

    async def test_create_requires_session(self, api):
        response = await api.post("/api/courses", json={"title": "Intro"})

        assert response.status_code == 401
        assert response.json()["error"] == "NO_SESSION"

    async def test_create_sets_creator_from_session(self, api, alice):
        headers = session_header(await sign_in(alice))

        course = await _create_course(api, headers)

        assert course["creator_wallet"] == alice.address.lower()
        assert course["lessons"] == []

    async def test_owner_edits_course(self, api, alice):
        headers = session_header(await sign_in(alice))
        course = await _create_course(api, headers)

        response = await api.put(
            f"/api/courses/{course['id']}",
            json={
                "title": "Renamed",
                "description": "",
                "lessons": [
                    {"title": "Second", "youtube_url": "https://youtu.be/b", "order_index": 2},
                    {"title": "First", "youtube_url": "https://youtu.be/a", "order_index": 1},
                ],
            },
            headers=headers,
        )

        data = response.json()
        assert response.status_code == 200
        assert data["title"] == "Renamed"
        assert data["description"] is None
        assert [lesson["title"] for lesson in data["lessons"]] == ["First", "Second"]

        loaded = await api.get(f"/api/courses/{course['id']}", headers=headers)
        assert loaded.status_code == 200
        assert len(loaded.json()["lessons"]) == 2

    async def test_other_wallet_forbidden(self, api, alice, bob):
        course = await _create_course(api, session_header(await sign_in(alice)))
        bob_headers = session_header(await sign_in(bob))

        read = await api.get(f"/api/courses/{course['id']}", headers=bob_headers)
        update = await api.put(
            f"/api/courses/{course['id']}",
            json={"title": "Hijacked"},
            headers=bob_headers,
        )
        delete = await api.delete(f"/api/courses/{course['id']}", headers=bob_headers)

        for response in (read, update, delete):
            assert response.status_code == 403
            assert response.json()["error"] == "UNAUTHORIZED"
            assert response.json()["reauthenticate"] is False

    async def test_forged_address_rejected(self, api, alice, bob):
        course = await _create_course(api, session_header(await sign_in(alice)))
        forged = await sign_in(bob)
        forged_headers = session_header(
            Session(
                address=alice.address.lower(),
                signature=forged.signature,
                message=forged.message,
                timestamp=forged.timestamp,
                expires_at=forged.expires_at,
            )
        )

        response = await api.delete(f"/api/courses/{course['id']}", headers=forged_headers)

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_SESSION"

    async def test_delete_course(self, api, alice):
        headers = session_header(await sign_in(alice))
        course = await _create_course(api, headers, title="Short lived")

        response = await api.delete(f"/api/courses/{course['id']}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": True, "title": "Short lived"}
        missing = await api.get(f"/api/courses/{course['id']}", headers=headers)
        assert missing.status_code == 404
        assert missing.json()["error"] == "ENTITY_NOT_FOUND"

    async def test_delete_lesson(self, api, alice, bob):
        headers = session_header(await sign_in(alice))
        course = await _create_course(api, headers)
        updated = await api.put(
            f"/api/courses/{course['id']}",
            json={
                "title": course["title"],
                "lessons": [{"title": "Only", "youtube_url": "https://youtu.be/a"}],
            },
            headers=headers,
        )
        lesson_id = updated.json()["lessons"][0]["id"]

        denied = await api.delete(
            f"/api/lessons/{lesson_id}", headers=session_header(await sign_in(bob))
        )
        deleted = await api.delete(f"/api/lessons/{lesson_id}", headers=headers)

        assert denied.status_code == 403
        assert deleted.status_code == 204
        loaded = await api.get(f"/api/courses/{course['id']}", headers=headers)
        assert loaded.json()["lessons"] == []

    async def test_unknown_course(self, api, alice):
        headers = session_header(await sign_in(alice))

        response = await api.get(f"/api/courses/{uuid4()}", headers=headers)

        assert response.status_code == 404


class TestProfileRoutes:
    """Public profiles and the creator dashboard."""

    async def test_profile_round_trip(self, api, alice):
        headers = session_header(await sign_in(alice))
        wallet = alice.address

        missing = await api.get(f"/api/profiles/{wallet}")
        updated = await api.put(
            f"/api/profiles/{wallet}",
            json={"display_name": "Alice", "twitter_handle": "@alice"},
            headers=headers,
        )
        public = await api.get(f"/api/profiles/{wallet}")

        assert missing.status_code == 404
        assert updated.status_code == 200
        assert updated.json()["twitter_handle"] == "alice"
        assert updated.json()["is_verified"] is False
        assert public.json()["display_name"] == "Alice"
        assert public.json()["wallet_address"] == wallet.lower()

    async def test_cannot_write_other_profile(self, api, alice, bob):
        response = await api.put(
            f"/api/profiles/{alice.address}",
            json={"display_name": "Not Alice"},
            headers=session_header(await sign_in(bob)),
        )

        assert response.status_code == 403
        assert "your own profile" in response.json()["message"]

    async def test_dashboard(self, api, alice, bob):
        alice_headers = session_header(await sign_in(alice))
        await _create_course(api, alice_headers, title="One")
        await _create_course(api, alice_headers, title="Two")
        await _create_course(api, session_header(await sign_in(bob)), title="Bob's")

        response = await api.get("/api/dashboard", headers=alice_headers)

        data = response.json()
        assert response.status_code == 200
        assert data["profile"] is None
        assert {course["title"] for course in data["courses"]} == {"One", "Two"}
        assert data["stats"] == {"total_courses": 2, "total_lessons": 0}

    async def test_dashboard_requires_session(self, api):
        response = await api.get("/api/dashboard")

        assert response.status_code == 401


class TestServiceRoutes:
    """Root, health and metrics."""

    async def test_root(self, api):
        response = await api.get("/")

        assert response.json()["service"] == "Sceau"

    async def test_health(self, api):
        response = await api.get("/api/health")

        assert response.status_code == 200
        assert response.json()["components"]["database"]["status"] == "healthy"

    async def test_request_id_header(self, api):
        response = await api.get("/", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    async def test_metrics(self, api):
        await api.get("/api/auth/session")

        response = await api.get("/metrics")

        assert response.status_code == 200
        assert "sceau_session_checks_total" in response.text
        assert "sceau_http_requests_total" in response.text
