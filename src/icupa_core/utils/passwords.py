"""Password hashing helpers.

Hashes are PBKDF2-HMAC-SHA256 derivations from ``cryptography`` and are
stored as ``pbkdf2_sha256$<iterations>$<salt_hex>$<hash_hex>``.

Both functions are CPU bound; call them from async code through
``run_in_executor``.
"""

import secrets

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 390_000
KEY_LENGTH = 32
SALT_BYTES = 16


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=iterations,
    )


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """
    Hash a password with a random salt.

    Args:
        password: Plaintext password
        iterations: PBKDF2 rounds

    Returns:
        Encoded hash carrying its own algorithm, rounds and salt

    Raises:
        ValueError: If the password is empty
    """
    if not password:
        raise ValueError("Password must not be empty")

    salt = secrets.token_bytes(SALT_BYTES)
    digest = _kdf(salt, iterations).derive(password.encode("utf-8"))
    return f"{ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, hashed: str) -> bool:
    """Check a password against a stored hash. Malformed hashes never match."""
    try:
        algorithm, iterations, salt_hex, digest_hex = hashed.split("$")
    except (AttributeError, ValueError):
        return False

    if algorithm != ALGORITHM:
        return False

    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
        rounds = int(iterations)
    except ValueError:
        return False

    if rounds < 1 or len(expected) != KEY_LENGTH:
        return False

    try:
        _kdf(salt, rounds).verify(password.encode("utf-8"), expected)
    except InvalidKey:
        return False
    return True
