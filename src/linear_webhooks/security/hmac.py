"""Security – HMAC-SHA256 digest and constant-time comparison."""
from __future__ import annotations

import hashlib
import hmac

__all__ = ["DIGEST_SIZE", "hmac_sha256", "timing_safe_equal"]

DIGEST_SIZE: int = hashlib.sha256().digest_size


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    """Return the raw 32-byte HMAC-SHA256 of *message* keyed with *key*."""
    return hmac.new(key, message, hashlib.sha256).digest()


def timing_safe_equal(a: bytes, b: bytes) -> bool:
    """Compare two byte strings in time independent of where they differ.

    Delegates to :func:`hmac.compare_digest`, which inspects every byte
    instead of returning at the first mismatch.
    """
    return hmac.compare_digest(a, b)
