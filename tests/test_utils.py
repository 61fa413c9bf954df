"""Tests for tagspan.utils."""

from tagspan.utils import get_logger, hash_str


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "tagspan.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("tagspan.resolver").name == "tagspan.resolver"
        assert get_logger("tagspan").name == "tagspan"

    def test_does_not_match_similar_prefix(self) -> None:
        assert get_logger("tagspanner").name == "tagspan.tagspanner"


class TestHashStr:
    def test_sha256(self) -> None:
        assert hash_str("hello") == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_utf8(self) -> None:
        assert hash_str("€") != hash_str("EUR")
        assert len(hash_str("€")) == 64
