"""
Shared test helpers.
"""

from sceau.application.use_cases.authenticate_wallet import AuthenticateWallet
from sceau.domain.entities.session import Session
from sceau.domain.services.challenge_message import build_message
from sceau.domain.value_objects.wallet_scheme import WalletScheme
from sceau.infrastructure.auth.session_codec import SessionCodec
from sceau.infrastructure.storage import MemoryKeyValueStorage, SessionStore

# 2023-11-14T22:13:20.000Z
FIXED_NOW = 1_700_000_000_000

ETH_ADDRESS = "0xabc0000000000000000000000000000000000001"
SOL_ADDRESS = "DYw8jCTfwHNRJhhmFcbXvVDTqWMEVFBX6ZKUmG5CNSKK"


class FakeClock:
    """Settable millisecond clock."""

    def __init__(self, now: int = FIXED_NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeCookieStorage:
    """In-memory cookie jar recording expiry per cookie."""

    read_only = False

    def __init__(self):
        self.values = {}
        self.expiry = {}

    def get_cookie(self, name):
        return self.values.get(name)

    def set_cookie(self, name, value, expires_at_ms):
        self.values[name] = value
        self.expiry[name] = expires_at_ms

    def clear_cookie(self, name):
        self.values.pop(name, None)
        self.expiry.pop(name, None)


def make_session(
    address: str = ETH_ADDRESS,
    timestamp: int = FIXED_NOW,
    signature: str = "0xsig",
) -> Session:
    """Session with a real message layout but an arbitrary signature."""
    return Session.issue(
        address=address,
        signature=signature,
        message=build_message(address, timestamp),
        timestamp=timestamp,
    )


async def sign_in(signer, scheme: WalletScheme = WalletScheme.ETHEREUM, clock=None) -> Session:
    """Signed session for signer, as a wallet client would produce it."""
    store = SessionStore(scheme, local=MemoryKeyValueStorage(), clock=clock)
    return await AuthenticateWallet(store, scheme, clock=clock).execute(
        signer, signer.address
    )


def session_header(session: Session) -> dict:
    """Request header carrying the session JSON."""
    return {"X-Wallet-Session": SessionCodec.encode(session)}
