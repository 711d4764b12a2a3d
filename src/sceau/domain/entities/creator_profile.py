"""
CreatorProfile entity - Public profile keyed by wallet address.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class CreatorProfile:
    """
    Creator profile entity.

    The wallet address is both the key and the owner identity: a profile
    can only be written by a session for the same wallet.
    """

    wallet_address: str
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    about_me: Optional[str] = None
    website_url: Optional[str] = None
    twitter_handle: Optional[str] = None
    is_verified: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate profile data after initialization."""
        if not self.wallet_address:
            raise ValueError("Wallet address is required")

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": str(self.id),
            "wallet_address": self.wallet_address,
            "display_name": self.display_name,
            "avatar_url": self.avatar_url,
            "about_me": self.about_me,
            "website_url": self.website_url,
            "twitter_handle": self.twitter_handle,
            "is_verified": self.is_verified,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
