"""Client-side inspection of session and capability tokens.

The client never holds signing keys, so nothing here verifies signatures.
These helpers only read claims to reject obviously unusable tokens before a
round trip to the API.
"""

from __future__ import annotations

import base64
import binascii
import datetime
import json
import logging
from typing import Any

from jose import jwt
from jose.exceptions import JWTError

from authstate.core.errors import ValidationError

logger = logging.getLogger(__name__)

# exp values above this are milliseconds since the epoch
_MILLISECOND_EXP_THRESHOLD = 10**11


def _now_utc() -> datetime.datetime:
    """Return the current UTC time as an aware datetime."""
    return datetime.datetime.now(datetime.timezone.utc)


def _base64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def decode_token_claims(token: str) -> dict[str, Any]:
    """Read the claims of a token without verifying it.

    Two formats are accepted: a JWT, and a base64 encoded JSON object as
    issued for password-reset and email-verification links.

    Args:
        token: The encoded token.

    Returns:
        Decoded claims as a dictionary.

    Raises:
        ValidationError: If the token is in neither format.
    """
    if not token or not token.strip():
        raise ValidationError("Invalid token")

    try:
        return jwt.get_unverified_claims(token)
    except JWTError:
        pass

    try:
        claims = json.loads(_base64url_decode(token.strip()).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise ValidationError("Invalid token") from exc

    if not isinstance(claims, dict):
        raise ValidationError("Invalid token")
    return claims


def validate_secret_token(token: str, *, now: datetime.datetime | None = None) -> dict[str, Any]:
    """Check that a capability token is well formed and not expired.

    Args:
        token: Reset or verification token taken from an emailed link.
        now: Reference time, defaults to the current UTC time.

    Returns:
        The token claims.

    Raises:
        ValidationError: If the token cannot be decoded or has expired.
    """
    claims = decode_token_claims(token)
    exp = claims.get("exp")
    if exp is None:
        return claims

    try:
        exp_seconds = float(exp)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Invalid token") from exc
    if exp_seconds > _MILLISECOND_EXP_THRESHOLD:
        exp_seconds /= 1000

    reference = now or _now_utc()
    if exp_seconds < reference.timestamp():
        logger.info("Rejected expired capability token %s", redact_token(token))
        raise ValidationError("Token has expired")
    return claims


def redact_token(token: str | None) -> str:
    """Return a log-safe form of a token."""
    if not token:
        return "<none>"
    return f"{token[:6]}...({len(token)} chars)"
