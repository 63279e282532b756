"""Credential hashing."""

from app.security.passwords import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
]
