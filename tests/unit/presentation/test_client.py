"""
SceauClient tests against the in-process app.

Sessions are signed with the wall clock: the httpx cookie jar drops
cookies whose expiry has passed in real time.
"""

import httpx
import pytest
import pytest_asyncio

from sceau.config.settings import get_settings, override_settings
from sceau.client import SceauApiError, SceauClient
from sceau.domain.entities.session import Session
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.signing import EthereumKeySigner, SolanaKeypairSigner
from tests.helpers import sign_in


@pytest.fixture
def alice():
    return EthereumKeySigner.generate()


@pytest_asyncio.fixture
async def client(app, tmp_path):
    async with SceauClient(
        "http://test",
        transport=httpx.ASGITransport(app=app),
        storage_dir=str(tmp_path),
    ) as sceau:
        yield sceau


class TestClientSession:
    """Login, restore and logout through the client."""

    async def test_login_then_privileged_calls(self, client, alice):
        session = await client.login(alice, alice.address)

        identity = await client.whoami()
        course = await client.create_course("Intro", "First course")
        dashboard = await client.get_dashboard()

        assert client.current_session() == session
        assert identity["address"] == alice.address.lower()
        assert course["creator_wallet"] == alice.address.lower()
        assert dashboard["stats"]["total_courses"] == 1

    async def test_session_file_survives_new_client(self, app, tmp_path, alice):
        transport = httpx.ASGITransport(app=app)
        async with SceauClient(
            "http://test", transport=transport, storage_dir=str(tmp_path)
        ) as first:
            session = await first.login(alice, alice.address)

        async with SceauClient(
            "http://test", transport=transport, storage_dir=str(tmp_path)
        ) as second:
            assert second.current_session() == session
            identity = await second.whoami()

        assert identity["address"] == alice.address.lower()
        assert (tmp_path / "sessions.json").exists()

    async def test_storage_dir_from_settings(self, app, tmp_path, alice):
        configured = tmp_path / "configured"
        override_settings(
            get_settings().model_copy(update={"SESSION_STORAGE_DIR": str(configured)})
        )

        async with SceauClient(
            "http://test", transport=httpx.ASGITransport(app=app)
        ) as sceau:
            await sceau.login(alice, alice.address)

        assert sceau.session_store.local.path == configured / "sessions.json"
        assert (configured / "sessions.json").exists()

    async def test_logout(self, client, alice):
        await client.login(alice, alice.address)

        client.logout()

        assert client.current_session() is None
        with pytest.raises(SceauApiError) as exc_info:
            await client.whoami()
        assert exc_info.value.code == "NO_SESSION"
        assert exc_info.value.status_code == 401

    async def test_rejected_session_signs_out(self, client, alice):
        """A session the server rejects is removed from the client."""
        bob = EthereumKeySigner.generate()
        signed = await sign_in(bob)
        client.session_store.set(
            Session(
                address=alice.address.lower(),
                signature=signed.signature,
                message=signed.message,
                timestamp=signed.timestamp,
                expires_at=signed.expires_at,
            )
        )

        with pytest.raises(SceauApiError) as exc_info:
            await client.whoami()

        assert exc_info.value.code == "INVALID_SESSION"
        assert exc_info.value.requires_reauthentication
        assert client.session_store.get() is None

    async def test_forbidden_keeps_session(self, client, alice):
        other = EthereumKeySigner.generate()

        await client.login(alice, alice.address)
        with pytest.raises(SceauApiError) as exc_info:
            await client.update_profile(other.address, display_name="Not mine")

        assert exc_info.value.code == "UNAUTHORIZED"
        assert client.session_store.get() is not None


class TestClientContent:
    """Course and profile calls."""

    async def test_course_lifecycle(self, client, alice):
        await client.login(alice, alice.address)
        course = await client.create_course("Intro")

        updated = await client.update_course(
            course["id"],
            "Intro, revised",
            lessons=[{"title": "Welcome", "youtube_url": "https://youtu.be/a"}],
        )
        await client.delete_lesson(updated["lessons"][0]["id"])
        title = await client.delete_course(course["id"])

        assert updated["title"] == "Intro, revised"
        assert title == "Intro, revised"
        with pytest.raises(SceauApiError) as exc_info:
            await client.get_course(course["id"])
        assert exc_info.value.status_code == 404

    async def test_profiles(self, client, alice):
        await client.login(alice, alice.address)

        assert await client.get_profile(alice.address) is None

        await client.update_profile(alice.address, display_name="Alice")
        profile = await client.get_profile(alice.address)

        assert profile["display_name"] == "Alice"

    async def test_challenge_preview(self, client, alice):
        challenge = await client.get_challenge(alice.address)

        assert challenge["scheme"] == "ethereum"
        assert alice.address.lower() in challenge["message"]

    async def test_verify_session(self, client, alice):
        session = await client.login(alice, alice.address)

        assert await client.verify_session(session) is True


class TestSolanaClient:
    """Solana scheme end to end."""

    async def test_login_and_create(self, app, tmp_path):
        signer = SolanaKeypairSigner.generate()
        async with SceauClient(
            "http://test",
            scheme=WalletScheme.SOLANA,
            transport=httpx.ASGITransport(app=app),
            storage_dir=str(tmp_path),
            strict_verification=True,
        ) as client:
            await client.login(signer, signer.address)

            identity = await client.whoami()
            course = await client.create_course("Anchor basics")
            restored = client.current_session()

        assert identity["address"] == signer.address
        assert identity["scheme"] == "solana"
        assert course["creator_wallet"] == signer.address
        assert restored is not None
