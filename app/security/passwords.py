"""Password hashing with PBKDF2-HMAC-SHA256.

Hashes are stored as ``salt$hash`` with both parts hex-encoded. The work
factor is fixed in settings and is not a per-call parameter.
"""

import hashlib
import secrets

from settings import PASSWORD_ITERATIONS

SALT_LENGTH = 32
HASH_ALGORITHM = "sha256"


def hash_password(password: str, salt: bytes | None = None) -> str:
    """Hash a password, generating a fresh salt unless one is given."""
    if salt is None:
        salt = secrets.token_bytes(SALT_LENGTH)
    dk = hashlib.pbkdf2_hmac(HASH_ALGORITHM, password.encode("utf-8"), salt, PASSWORD_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Check a password against a stored ``salt$hash`` string."""
    try:
        salt_hex, _ = stored_hash.split("$")
        candidate = hash_password(password, bytes.fromhex(salt_hex))
    except (ValueError, AttributeError):
        return False
    return secrets.compare_digest(candidate, stored_hash)
