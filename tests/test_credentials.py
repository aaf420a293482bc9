"""Tests for credential hashing."""

import hashlib
from unittest.mock import patch

import pytest

from bank_ledger.credentials import hash_secret, verify_secret
from bank_ledger.exceptions import CredentialHashingError


class TestHashSecret:
    """Tests for hash_secret."""

    def test_is_sha256_hex(self) -> None:
        assert hash_secret("pw1") == hashlib.sha256(b"pw1").hexdigest()

    def test_deterministic(self) -> None:
        assert hash_secret("s3cret") == hash_secret("s3cret")

    def test_different_secrets_differ(self) -> None:
        assert hash_secret("pw1") != hash_secret("pw2")

    def test_never_returns_raw_secret(self) -> None:
        assert "pw1" not in hash_secret("pw1")

    def test_unicode_secret(self) -> None:
        assert len(hash_secret("contraseña")) == 64

    def test_lone_surrogate_secret(self) -> None:
        digest = hash_secret("pw\ud800")

        assert len(digest) == 64
        assert digest != hash_secret("pw")

    @pytest.mark.parametrize("secret", [None, 1234, b"pw1"])
    def test_non_string_rejected(self, secret: object) -> None:
        with pytest.raises(TypeError, match="Secret must be a string"):
            hash_secret(secret)  # type: ignore[arg-type]

    def test_unavailable_algorithm_is_fatal(self) -> None:
        with patch("bank_ledger.credentials.hashlib.new", side_effect=ValueError("unsupported")):
            with pytest.raises(CredentialHashingError):
                hash_secret("pw1")


class TestVerifySecret:
    """Tests for verify_secret."""

    def test_match(self) -> None:
        assert verify_secret("pw1", hash_secret("pw1")) is True

    def test_mismatch(self) -> None:
        assert verify_secret("pw1", hash_secret("PW1")) is False

    def test_uses_constant_time_compare(self) -> None:
        with patch("bank_ledger.credentials.hmac.compare_digest", return_value=True) as compare:
            assert verify_secret("a", "b") is True

        compare.assert_called_once_with(hash_secret("a"), "b")
