"""
Test fixtures and configuration.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.persistence.database import Database
from sceau.infrastructure.signing import EthereumKeySigner, SolanaKeypairSigner
from sceau.infrastructure.storage import MemoryKeyValueStorage, SessionStore
from tests.helpers import FakeClock, FakeCookieStorage

# In-memory SQLite shared through a single connection
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen at FIXED_NOW."""
    return FakeClock()


@pytest.fixture
def eth_signer() -> EthereumKeySigner:
    """Ethereum signer with a fresh key."""
    return EthereumKeySigner.generate()


@pytest.fixture
def other_eth_signer() -> EthereumKeySigner:
    """Second Ethereum signer for ownership tests."""
    return EthereumKeySigner.generate()


@pytest.fixture
def sol_signer() -> SolanaKeypairSigner:
    """Solana signer with a fresh keypair."""
    return SolanaKeypairSigner.generate()


@pytest.fixture
def local_storage() -> MemoryKeyValueStorage:
    return MemoryKeyValueStorage()


@pytest.fixture
def cookie_storage() -> FakeCookieStorage:
    return FakeCookieStorage()


@pytest.fixture
def eth_store(local_storage, cookie_storage, clock) -> SessionStore:
    """Ethereum session store over memory local store and fake cookies."""
    return SessionStore(
        WalletScheme.ETHEREUM,
        local=local_storage,
        cookies=cookie_storage,
        clock=clock,
    )


@pytest.fixture
def sol_store(local_storage, cookie_storage, clock) -> SessionStore:
    """Solana session store sharing storage with eth_store."""
    return SessionStore(
        WalletScheme.SOLANA,
        local=local_storage,
        cookies=cookie_storage,
        clock=clock,
    )


@pytest_asyncio.fixture(scope="function")
async def test_db() -> AsyncGenerator[Database, None]:
    """
    Create test database and tables.

    Each test gets a clean database.
    """
    db = Database(database_url=TEST_DATABASE_URL, echo=False)
    await db.connect()
    await db.create_tables()

    yield db

    await db.disconnect()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_db: Database) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for tests."""
    async with test_db.session() as session:
        yield session
