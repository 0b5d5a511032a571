"""
Unit tests for password hashing.
"""

import pytest

from tracking.utils.auth import PasswordHasher


@pytest.mark.parametrize("password", ["secret123", "p@ss w0rd", "ünïcødé-pässwörd", "x"])
def test_hash_then_verify(fast_hasher, password):
    assert fast_hasher.verify(password, fast_hasher.hash(password)) is True


def test_hashes_are_salted(fast_hasher):
    first = fast_hasher.hash("secret123")
    second = fast_hasher.hash("secret123")

    assert first != second
    assert fast_hasher.verify("secret123", first)
    assert fast_hasher.verify("secret123", second)


def test_wrong_password_does_not_verify(fast_hasher):
    assert fast_hasher.verify("wrong", fast_hasher.hash("secret123")) is False


@pytest.mark.parametrize("bad_hash", [None, "", "not-a-hash", "$2b$10$tooshort"])
def test_malformed_hash_fails_closed(fast_hasher, bad_hash):
    assert fast_hasher.verify("secret123", bad_hash) is False


def test_default_work_factor_is_ten():
    assert PasswordHasher().hash("secret123").startswith("$2b$10$")


def test_long_passwords_are_accepted(fast_hasher):
    password = "a" * 100
    hashed = fast_hasher.hash(password)

    assert fast_hasher.verify(password, hashed)


def test_burn_reuses_one_dummy_hash(fast_hasher):
    fast_hasher.burn("secret123")
    first = fast_hasher._dummy_hash
    fast_hasher.burn("not-a-real-password")

    assert first is not None
    assert fast_hasher._dummy_hash == first
