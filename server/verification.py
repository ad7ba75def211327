# verification.py
"""
Discord request verification.

Discord signs every interaction with Ed25519:
  message   = X-Signature-Timestamp + raw_body   (exact bytes, never re-serialized JSON)
  signature = X-Signature-Ed25519               (hex, 64 bytes)
The public key comes from the application's settings page.
"""

from __future__ import annotations

import logging

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

logger = logging.getLogger(__name__)

MIN_SIGNATURE_LENGTH = 64
MIN_TIMESTAMP_LENGTH = 10


def has_signature_shape(signature: str | None, timestamp: str | None) -> bool:
    """Cheap presence/length check, done before any cryptographic work."""
    if not signature or not timestamp:
        return False
    return len(signature) >= MIN_SIGNATURE_LENGTH and len(timestamp) >= MIN_TIMESTAMP_LENGTH


def verify_signature(raw_body: bytes, signature: str, timestamp: str, public_key: bytes) -> bool:
    """
    Returns True only if `signature` is a valid detached signature over
    timestamp + raw_body. Bad hex, wrong lengths and mismatches all return False.
    """
    try:
        verify_key = VerifyKey(public_key)
        verify_key.verify(timestamp.encode("utf-8") + raw_body, bytes.fromhex(signature))
        return True
    except (BadSignatureError, ValueError, TypeError) as e:
        logger.debug("signature rejected: %r", e)
        return False
