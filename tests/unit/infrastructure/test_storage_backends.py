"""
Unit tests for key-value and cookie storage backends.
"""

import httpx

from sceau.infrastructure.storage.cookie_storage import (
    HttpxCookieStorage,
    RequestCookieStorage,
)
from sceau.infrastructure.storage.key_value_storage import (
    FileKeyValueStorage,
    MemoryKeyValueStorage,
)
from tests.helpers import FIXED_NOW


class TestMemoryKeyValueStorage:
    """Unit tests for MemoryKeyValueStorage."""

    def test_set_get_remove(self):
        storage = MemoryKeyValueStorage()

        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"

        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_remove_missing_key(self):
        MemoryKeyValueStorage().remove_item("missing")


class TestFileKeyValueStorage:
    """Unit tests for FileKeyValueStorage."""

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "sessions.json"

        FileKeyValueStorage(path).set_item("wallet_session", "{}")

        assert FileKeyValueStorage(path).get_item("wallet_session") == "{}"

    def test_missing_file_reads_empty(self, tmp_path):
        assert FileKeyValueStorage(tmp_path / "none.json").get_item("k") is None

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "sessions.json"
        path.write_text("{not json")

        assert FileKeyValueStorage(path).get_item("k") is None

    def test_remove_keeps_other_keys(self, tmp_path):
        storage = FileKeyValueStorage(tmp_path / "sessions.json")
        storage.set_item("wallet_session", "a")
        storage.set_item("solana_session", "b")

        storage.remove_item("wallet_session")

        assert storage.get_item("wallet_session") is None
        assert storage.get_item("solana_session") == "b"


class TestHttpxCookieStorage:
    """Unit tests for HttpxCookieStorage."""

    def test_set_get_roundtrip(self):
        storage = HttpxCookieStorage()
        value = '{"address": "0xabc", "message": "a b\\nc"}'

        storage.set_cookie("wallet_session", value, FIXED_NOW)

        assert storage.get_cookie("wallet_session") == value

    def test_cookie_attributes(self):
        """Path /, SameSite=Lax, readable by scripts, expiry in seconds."""
        cookies = httpx.Cookies()
        HttpxCookieStorage(cookies).set_cookie("wallet_session", "{}", FIXED_NOW)

        cookie = next(iter(cookies.jar))
        assert cookie.path == "/"
        assert cookie.expires == FIXED_NOW // 1000
        assert cookie.get_nonstandard_attr("SameSite") == "Lax"
        assert not cookie.secure
        assert not cookie.has_nonstandard_attr("HttpOnly")

    def test_value_is_percent_encoded(self):
        cookies = httpx.Cookies()
        HttpxCookieStorage(cookies).set_cookie("wallet_session", '{"a": 1}', FIXED_NOW)

        assert next(iter(cookies.jar)).value == "%7B%22a%22%3A%201%7D"

    def test_clear(self):
        storage = HttpxCookieStorage()
        storage.set_cookie("wallet_session", "{}", FIXED_NOW)

        storage.clear_cookie("wallet_session")

        assert storage.get_cookie("wallet_session") is None


class TestRequestCookieStorage:
    """Unit tests for the read-only request cookie view."""

    def test_reads_and_decodes(self):
        storage = RequestCookieStorage({"wallet_session": "%7B%22a%22%3A%201%7D"})

        assert storage.get_cookie("wallet_session") == '{"a": 1}'
        assert storage.read_only

    def test_writes_ignored(self):
        cookies = {}
        storage = RequestCookieStorage(cookies)

        storage.set_cookie("wallet_session", "{}", FIXED_NOW)

        assert cookies == {}
