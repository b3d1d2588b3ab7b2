from __future__ import annotations

import hashlib
import secrets

PBKDF2_DIGEST = "sha512"
PBKDF2_ITERATIONS = 1000
PBKDF2_KEY_LENGTH = 64
SALT_BYTES = 16
TOKEN_BYTES = 64


def hash_password(password: str, salt: str) -> str:
    """Derive the hex-encoded PBKDF2-HMAC-SHA512 hash of ``password``.

    The salt is used as its UTF-8 text (the hex string itself), not the
    decoded bytes, so hashes stay comparable with existing stored values.
    """
    digest = hashlib.pbkdf2_hmac(
        PBKDF2_DIGEST,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        PBKDF2_ITERATIONS,
        dklen=PBKDF2_KEY_LENGTH,
    )
    return digest.hex()


def verify_password(password: str, salt: str, password_hash: str) -> bool:
    return hash_password(password, salt) == password_hash


def generate_salt() -> str:
    return secrets.token_hex(SALT_BYTES)


def generate_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)
