"""Webhooks – WebhookDelivery and the logged verify_delivery edge helper.

The verifier itself never logs. Request handlers that want an audit trail
build a :class:`WebhookDelivery` from what their framework received and pass
it to :func:`verify_delivery`::

    delivery = WebhookDelivery.from_request(await request.body(), request.headers)
    verify_delivery(verifier, delivery)
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from linear_webhooks.kernel.errors import WebhookVerificationError
from linear_webhooks.observability.logging import Logger, get_logger
from linear_webhooks.webhooks.constants import SIGNATURE_HEADER
from linear_webhooks.webhooks.verifier import WebhookVerifier, payload_timestamp

__all__ = ["WebhookDelivery", "verify_delivery"]

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class WebhookDelivery:
    """The verification inputs extracted from one inbound request.

    ``timestamp`` wins when set. Otherwise it is read from ``payload``, or
    from the decoded body when ``decode_body`` is set. Nothing is decoded
    until the signature has been checked.
    """

    raw_body: bytes
    signature: str | bytes | None
    timestamp: int | None = None
    payload: Mapping[str, Any] | None = dataclasses.field(default=None, repr=False, compare=False)
    decode_body: bool = False

    @classmethod
    def from_request(
        cls,
        raw_body: bytes,
        headers: Mapping[str, str],
        payload: Mapping[str, Any] | None = None,
        *,
        signature_header: str = SIGNATURE_HEADER,
    ) -> WebhookDelivery:
        """Pick the signature header (case-insensitive) and keep the payload for later.

        When *payload* is omitted the body is decoded by :func:`verify_delivery`
        once the signature is known to be good; pass the already parsed
        payload to avoid decoding twice.
        """
        wanted = signature_header.lower()
        signature = next((v for k, v in headers.items() if k.lower() == wanted), None)
        return cls(
            raw_body=raw_body,
            signature=signature,
            payload=payload,
            decode_body=payload is None,
        )


def verify_delivery(
    verifier: WebhookVerifier,
    delivery: WebhookDelivery,
    *,
    logger: Logger | None = None,
) -> bool:
    """Verify *delivery*, logging the outcome. Errors are re-raised unchanged."""
    log = logger or _log
    timestamp = delivery.timestamp
    try:
        if timestamp is None and delivery.payload is not None:
            verifier.verify(delivery.raw_body, delivery.signature)
            timestamp = payload_timestamp(delivery.payload)
            verifier.verify_timestamp(timestamp)
        elif timestamp is None and delivery.decode_body:
            timestamp = payload_timestamp(verifier.parse(delivery.raw_body, delivery.signature))
        else:
            verifier.verify(delivery.raw_body, delivery.signature, timestamp)
    except WebhookVerificationError as exc:
        log.warning(
            "webhook.rejected",
            **{**exc.log_fields(), "body_bytes": len(delivery.raw_body), "timestamp": timestamp},
        )
        raise
    log.info("webhook.verified", body_bytes=len(delivery.raw_body), timestamp=timestamp)
    return True
