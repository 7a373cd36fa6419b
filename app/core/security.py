"""
Password hashing.

Thin wrapper around bcrypt. Stored hashes are opaque strings.
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a plaintext password.

    Args:
        password: Plaintext password

    Returns:
        bcrypt hash as a string
    """
    return bcrypt.hashpw(_secret(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored hash."""
    try:
        return bcrypt.checkpw(_secret(password), hashed_password.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False
