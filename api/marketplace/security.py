"""
Password hashing for buyer and seller accounts.

bcrypt only reads the first 72 bytes of its input, and bcrypt>=5 refuses
anything longer. Passwords are therefore reduced to a fixed-length SHA-256
digest (base64, 44 bytes) before they reach bcrypt.
"""

from __future__ import annotations

import base64
import hashlib

import bcrypt

from core import settings


def _bcrypt_input(plain_password: str | None) -> bytes:
    password = (plain_password or "").encode("utf-8")
    if not password:
        return b""
    return base64.b64encode(hashlib.sha256(password).digest())


def hash_password(plain_password: str | None) -> str | None:
    """
    Return a bcrypt hash, or None when no password was supplied.
    """
    password = _bcrypt_input(plain_password)
    if not password:
        return None
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds())
    return bcrypt.hashpw(password, salt).decode("utf-8")


def verify_password(plain_password: str | None, password_hash: str | None) -> bool:
    password = _bcrypt_input(plain_password)
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False
