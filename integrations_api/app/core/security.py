"""
Password hashing helper.

Passwords are stored as PBKDF2‑HMAC‑SHA256 digests in the form
``salthex$hashhex``.  Token issuance and verification happen outside
this service; only storage of user credentials is handled here.
"""

import hashlib
import os

ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"

