"""Password hashing with scrypt."""

from __future__ import annotations

import hashlib
import hmac
import os

_SCHEME = "scrypt"
_N, _R, _P = 2**14, 8, 1


def hash_password(password: str) -> str:
    """Return ``scrypt$<salt hex>$<hash hex>`` for ``password``."""
    salt = os.urandom(16)
    digest = hashlib.scrypt(password.encode("utf-8"), salt=salt, n=_N, r=_R, p=_P)
    return f"{_SCHEME}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    scheme, _, rest = encoded.partition("$")
    salt_hex, _, digest_hex = rest.partition("$")
    if scheme != _SCHEME or not salt_hex or not digest_hex:
        return False
    digest = hashlib.scrypt(
        password.encode("utf-8"), salt=bytes.fromhex(salt_hex), n=_N, r=_R, p=_P
    )
    return hmac.compare_digest(digest.hex(), digest_hex)
