"""
linear_webhooks – HMAC-SHA256 verification for inbound webhook deliveries.

Import path convention::

    from linear_webhooks import WebhookVerifier
    from linear_webhooks.kernel.errors import InvalidSignatureError
    from linear_webhooks.webhooks import SIGNATURE_HEADER, TIMESTAMP_FIELD
"""

from linear_webhooks.kernel.errors import (
    InvalidSignatureError,
    MalformedPayloadError,
    MalformedSignatureError,
    StaleTimestampError,
    WebhookVerificationError,
)
from linear_webhooks.webhooks import (
    SIGNATURE_HEADER,
    TIMESTAMP_FIELD,
    WebhookSigner,
    WebhookVerifier,
)

__version__ = "0.1.0"
__all__ = [
    "InvalidSignatureError",
    "MalformedPayloadError",
    "MalformedSignatureError",
    "SIGNATURE_HEADER",
    "StaleTimestampError",
    "TIMESTAMP_FIELD",
    "WebhookSigner",
    "WebhookVerificationError",
    "WebhookVerifier",
    "__version__",
]
