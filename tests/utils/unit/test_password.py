"""
Unit Tests for utils/password.py (bcrypt hashing)
"""

import pytest

from utils.password import hash_password, verify_password


class TestHashPassword:

    def test_bcrypt_hash_with_default_cost(self):
        password_hash = hash_password("techmart123")

        assert password_hash.startswith("$2b$12$")
        assert "techmart123" not in password_hash

    def test_salted(self):
        assert hash_password("techmart123", rounds=4) != hash_password("techmart123", rounds=4)

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            hash_password("")

    def test_too_long_password_rejected(self):
        with pytest.raises(ValueError, match="72 bytes"):
            hash_password("x" * 73)


class TestVerifyPassword:

    def test_match_and_mismatch(self):
        password_hash = hash_password("techmart123", rounds=4)

        assert verify_password("techmart123", password_hash) is True
        assert verify_password("wrong", password_hash) is False

    def test_malformed_hash(self):
        assert verify_password("techmart123", "techmart123") is False
