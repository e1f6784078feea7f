"""Webhooks – HMAC-SHA256 request signing."""
from __future__ import annotations

from linear_webhooks.security.hmac import hmac_sha256

__all__ = ["WebhookSigner"]


class WebhookSigner:
    """Produces the hex signature a sender places in the ``linear-signature`` header."""

    @staticmethod
    def sign(payload: bytes, secret: str | bytes) -> str:
        """Return the lowercase hex HMAC-SHA256 of *payload*."""
        key = secret.encode("utf-8") if isinstance(secret, str) else secret
        return hmac_sha256(key, payload).hex()
