"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── WebhookVerificationError   (verification.py)
        ├── MalformedSignatureError
        ├── InvalidSignatureError
        ├── StaleTimestampError
        └── MalformedPayloadError
"""

from linear_webhooks.kernel.errors.base import BaseError
from linear_webhooks.kernel.errors.verification import (
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
