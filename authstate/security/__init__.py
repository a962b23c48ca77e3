"""Public security API exports."""
from __future__ import annotations

from .tokens import (
    decode_token_claims,
    redact_token,
    validate_secret_token,
)

__all__ = [
    "decode_token_claims",
    "redact_token",
    "validate_secret_token",
]
