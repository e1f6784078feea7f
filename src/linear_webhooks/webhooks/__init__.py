"""Webhooks – signature verification for inbound deliveries."""
from linear_webhooks.webhooks.constants import DEFAULT_TOLERANCE_MS, SIGNATURE_HEADER, TIMESTAMP_FIELD
from linear_webhooks.webhooks.delivery import WebhookDelivery, verify_delivery
from linear_webhooks.webhooks.settings import WebhookSettings
from linear_webhooks.webhooks.signer import WebhookSigner
from linear_webhooks.webhooks.verifier import WebhookVerifier

__all__ = [
    "DEFAULT_TOLERANCE_MS",
    "SIGNATURE_HEADER",
    "TIMESTAMP_FIELD",
    "WebhookDelivery",
    "WebhookSettings",
    "WebhookSigner",
    "WebhookVerifier",
    "verify_delivery",
]
