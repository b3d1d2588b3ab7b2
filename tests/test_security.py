"""Credential hashing tests."""

import hashlib
import string

from auth.security import generate_salt, generate_token, hash_password, verify_password


def test_hash_matches_pbkdf2_sha512() -> None:
    expected = hashlib.pbkdf2_hmac("sha512", b"pw1", b"somesalt", 1000, 64).hex()
    assert hash_password("pw1", "somesalt") == expected
    assert len(expected) == 128


def test_hash_is_deterministic_and_salted() -> None:
    assert hash_password("secret", "a") == hash_password("secret", "a")
    assert hash_password("secret", "a") != hash_password("secret", "b")


def test_verify_password() -> None:
    salt = generate_salt()
    stored = hash_password("correct", salt)
    assert verify_password("correct", salt, stored) is True
    assert verify_password("wrong", salt, stored) is False


def test_salt_and_token_are_random_hex() -> None:
    salt = generate_salt()
    token = generate_token()
    assert len(salt) == 32
    assert len(token) == 128
    assert set(salt + token) <= set(string.hexdigits.lower())
    assert generate_token() != token
