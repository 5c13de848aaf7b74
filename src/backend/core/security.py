"""Security utilities for caller identification.

Each request carries a signed bearer token whose ``sub`` claim is the
caller's principal identifier. Registrations and votes are attributed to
that identifier only; real-world identity verification happens upstream.
"""

import re
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt

from core.config import settings

# Token issuer and audience for validation
TOKEN_ISSUER = "election-ledger-api"
TOKEN_AUDIENCE = "election-ledger-client"

# All-zero hex addresses ("0x0", "0x0000...0000") are treated as the null principal
_ZERO_ADDRESS = re.compile(r"^0x0+$", re.IGNORECASE)


def _create_token_base(
    data: dict[str, Any],
    token_type: str,
    expires_delta: timedelta,
) -> str:
    """Create a JWT token with standard claims."""
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + expires_delta
    to_encode.update(
        {
            "exp": expire,
            "iat": now,
            "type": token_type,
            "iss": TOKEN_ISSUER,
            "aud": TOKEN_AUDIENCE,
            "jti": secrets.token_urlsafe(16),
        }
    )
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(
    principal: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT access token for a principal."""
    delta = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return _create_token_base({"sub": principal}, "access", delta)


def decode_token(token: str, expected_type: str | None = None) -> dict[str, Any] | None:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token to decode
        expected_type: If provided, validates the token type matches

    Returns:
        The decoded payload or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            issuer=TOKEN_ISSUER,
            audience=TOKEN_AUDIENCE,
        )
        if expected_type and payload.get("type") != expected_type:
            return None
        return payload
    except JWTError:
        return None


def normalize_principal(principal: str | None) -> str:
    """Strip surrounding whitespace from a principal identifier."""
    return (principal or "").strip()


def is_null_principal(principal: str | None) -> bool:
    """True for the empty identifier or an all-zero hex address."""
    value = normalize_principal(principal)
    return not value or bool(_ZERO_ADDRESS.match(value))
