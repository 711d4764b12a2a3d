"""
Unit tests for RestoreSession and Logout.
"""

from sceau.application.use_cases.authenticate_wallet import AuthenticateWallet
from sceau.application.use_cases.session_lifecycle import Logout, RestoreSession
from sceau.domain.entities.session import SESSION_DURATION_MS
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.auth import EthereumSessionVerifier
from tests.helpers import make_session


class TestRestoreSession:
    """Unit tests for RestoreSession."""

    async def test_restores_signed_session(self, eth_store, eth_signer, clock):
        login = AuthenticateWallet(eth_store, WalletScheme.ETHEREUM, clock=clock)
        session = await login.execute(eth_signer, eth_signer.address)

        restored = RestoreSession(eth_store, EthereumSessionVerifier(clock=clock)).execute()

        assert restored == session

    def test_nothing_stored(self, eth_store, clock):
        assert RestoreSession(eth_store, EthereumSessionVerifier(clock=clock)).execute() is None

    def test_unverifiable_session_cleared(
        self, eth_store, local_storage, cookie_storage, clock
    ):
        eth_store.set(make_session(signature="0x" + "00" * 65))

        restored = RestoreSession(eth_store, EthereumSessionVerifier(clock=clock)).execute()

        assert restored is None
        assert local_storage.get_item("wallet_session") is None
        assert cookie_storage.get_cookie("wallet_session") is None

    async def test_expired_session_not_restored(self, eth_store, eth_signer, clock):
        login = AuthenticateWallet(eth_store, WalletScheme.ETHEREUM, clock=clock)
        await login.execute(eth_signer, eth_signer.address)
        clock.advance(SESSION_DURATION_MS + 1)

        restored = RestoreSession(eth_store, EthereumSessionVerifier(clock=clock)).execute()

        assert restored is None


class TestLogout:
    """Unit tests for Logout."""

    async def test_clears_both_locations(
        self, eth_store, eth_signer, local_storage, cookie_storage, clock
    ):
        login = AuthenticateWallet(eth_store, WalletScheme.ETHEREUM, clock=clock)
        await login.execute(eth_signer, eth_signer.address)

        Logout(eth_store).execute()

        assert eth_store.get() is None
        assert local_storage.get_item("wallet_session") is None
        assert cookie_storage.get_cookie("wallet_session") is None

    def test_idempotent(self, eth_store):
        Logout(eth_store).execute()
        Logout(eth_store).execute()

        assert eth_store.get() is None
