"""
Security helpers for password hashing and token authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed the
member id as the ``sub`` claim and an expiration timestamp (``exp``).
A secret key from the application settings is used to sign and verify
the token.  Passwords are hashed with PBKDF2‑HMAC‑SHA256 and a random
per‑password salt.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .db import get_connection
from .errors import Unauthorized


PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, str], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field holding the
    expiration time as a UNIX timestamp.  The token has the form
    ``header.payload.signature`` with each part base64url encoded.
    Clients send it back in the ``Authorization`` header as
    ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "42"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, settings.secret_key)
    signature_b64 = _b64_url_encode(signature)
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, str]]:
    """Verify and decode a JWT token.

    Returns the payload dictionary when the signature matches and the
    token has not expired, otherwise ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, settings.secret_key)
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
        return data
    except (ValueError, TypeError, AttributeError):
        # Malformed base64, JSON or claim types.
        return None


security = HTTPBearer(auto_error=False)


def get_current_member(credentials: HTTPAuthorizationCredentials = Depends(security)) -> Dict[str, object]:
    """Dependency that resolves the member behind the bearer token.

    Raises ``Unauthorized`` when the header is missing, the token is
    invalid or expired, or the member no longer exists.  On success
    returns the token payload extended with ``member_id``, ``username``
    and ``email``.
    """
    if credentials is None:
        raise Unauthorized("Not authenticated")
    payload = decode_access_token(credentials.credentials)
    if not payload:
        raise Unauthorized("Invalid or expired token")
    try:
        member_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthorized("Invalid or expired token")

    conn = get_connection()
    try:
        row = conn.execute(
            "SELECT id, username, email FROM members WHERE id = ?",
            (member_id,),
        ).fetchone()
    finally:
        conn.close()
    if not row:
        raise Unauthorized("Member no longer exists")
    payload["member_id"] = row["id"]
    payload["username"] = row["username"]
    payload["email"] = row["email"]
    return payload


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    holds the salt and hash separated by ``$`` (both hex encoded).
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Recomputes the PBKDF2‑HMAC digest with the stored salt and compares
    it in constant time.  A malformed stored value never matches.
    """
    try:
        salt_hex, hash_hex = hashed_password.split('$', 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except (AttributeError, ValueError):
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
