"""
Admin authentication: signed access tokens and password hashes.

Access tokens are compact HS256 JWTs built by hand (base64url header,
payload and HMAC-SHA256 signature) and signed with
``Settings.jwt_secret``.  ``iat`` and ``exp`` claims are added to every
token.  Stored passwords are PBKDF2-HMAC-SHA256 digests with a random
salt.

Two FastAPI dependencies guard the admin surface:

* ``get_current_user`` decodes the bearer token.  A missing token is
  answered with 401, an invalid or expired one with 403.
* ``require_admin`` additionally checks that the ``role`` claim is the
  literal string ``"admin"``.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings, settings as default_settings


ADMIN_ROLE = "admin"


def _b64_url_encode(data: bytes) -> str:
    """Encode ``data`` as unpadded base64url text."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Inverse of ``_b64_url_encode``; restores the stripped padding."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """HMAC-SHA256 of ``message`` keyed with ``secret``."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[int] = None,
    secret: Optional[str] = None,
) -> str:
    """Sign ``data`` into an access token.

    The payload is extended with ``iat`` and ``exp`` fields holding UNIX
    timestamps.  The token is a string of the form
    ``header.payload.signature``, where each part is base64url encoded.
    Clients must send it in the ``Authorization`` header as
    ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"username": "admin"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    secret : Optional[str]
        Signing key.  Defaults to ``settings.jwt_secret``.

    Returns
    -------
    str
        ``header.payload.signature``.
    """
    to_encode = data.copy()
    now = int(time.time())
    exp_seconds = expires_delta or default_settings.access_token_expire_minutes * 60
    to_encode["iat"] = now
    to_encode["exp"] = now + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, secret or default_settings.jwt_secret)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str, secret: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Return the claims of ``token``, or ``None`` if it is not valid.

    A token is valid when its signature matches ``secret`` and its
    ``exp`` claim lies in the future.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, secret or default_settings.jwt_secret)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        # binascii.Error and json.JSONDecodeError are both ValueErrors
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, (int, float)) or exp < time.time():
        return None
    return data


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return getattr(request.app.state, "settings", default_settings)


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    app_settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Dependency that retrieves the current authenticated user.

    Returns the decoded token payload.  Requests without a bearer token
    get 401; tokens that fail verification or have expired get 403.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials, app_settings.jwt_secret)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    return payload


def require_admin(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    """Dependency enforcing the ``admin`` role on the current user."""
    if current_user.get("role") != ADMIN_ROLE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def hash_password(password: str) -> str:
    """Return the ``salt$digest`` string stored for ``password``.

    Every call draws a fresh 16-byte salt; salt and digest are
    hex encoded.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, 100_000)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, 100_000)
    return hmac.compare_digest(dk, stored_hash)
