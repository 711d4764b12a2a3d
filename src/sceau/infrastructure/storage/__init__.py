"""
Client-side session storage.
"""

from sceau.infrastructure.storage.cookie_storage import (
    HttpxCookieStorage,
    RequestCookieStorage,
)
from sceau.infrastructure.storage.key_value_storage import (
    FileKeyValueStorage,
    MemoryKeyValueStorage,
)
from sceau.infrastructure.storage.session_store import SessionStore

__all__ = [
    "HttpxCookieStorage",
    "RequestCookieStorage",
    "FileKeyValueStorage",
    "MemoryKeyValueStorage",
    "SessionStore",
]
