"""Kernel – framework-agnostic building blocks."""

from linear_webhooks.kernel.errors import (
    BaseError,
    InvalidSignatureError,
    MalformedPayloadError,
    MalformedSignatureError,
    StaleTimestampError,
    WebhookVerificationError,
)

__all__ = [
    "BaseError",
    "InvalidSignatureError",
    "MalformedPayloadError",
    "MalformedSignatureError",
    "StaleTimestampError",
    "WebhookVerificationError",
]
