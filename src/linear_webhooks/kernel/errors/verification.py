"""Webhook verification errors: one class per distinguishable rejection.

Callers can tell malformed input (``MalformedSignatureError``) from a forged
or corrupted delivery (``InvalidSignatureError``) from a replay outside the
freshness window (``StaleTimestampError``). None of these ever carry the
shared secret or the expected digest.
"""

from __future__ import annotations

from typing import Any

from linear_webhooks.kernel.errors.base import BaseError


class WebhookVerificationError(BaseError):
    """A webhook delivery failed verification."""

    default_code = "webhook_verification_error"
    default_message = "Webhook verification failed"


class MalformedSignatureError(WebhookVerificationError):
    """The signature is missing or is not valid hexadecimal."""

    default_code = "malformed_signature"
    default_message = "Malformed webhook signature"


class InvalidSignatureError(WebhookVerificationError):
    """The signature does not match the body's HMAC digest."""

    default_code = "invalid_signature"
    default_message = "Invalid webhook signature"


class StaleTimestampError(WebhookVerificationError):
    """The delivery timestamp lies outside the freshness window."""

    default_code = "stale_timestamp"
    default_message = "Invalid webhook timestamp"

    def __init__(
        self,
        message: str | None = None,
        *,
        timestamp: int | None = None,
        delta_ms: int | None = None,
        tolerance_ms: int | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault(
            "detail",
            {"timestamp": timestamp, "delta_ms": delta_ms, "tolerance_ms": tolerance_ms},
        )
        super().__init__(message, **kwargs)
        self.timestamp = timestamp
        self.delta_ms = delta_ms
        self.tolerance_ms = tolerance_ms


class MalformedPayloadError(WebhookVerificationError):
    """The body is not a JSON object or carries an unusable timestamp field."""

    default_code = "malformed_payload"
    default_message = "Malformed webhook payload"


__all__ = [
    "InvalidSignatureError",
    "MalformedPayloadError",
    "MalformedSignatureError",
    "StaleTimestampError",
    "WebhookVerificationError",
]
