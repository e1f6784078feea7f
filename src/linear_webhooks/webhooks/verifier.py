"""Webhooks – WebhookVerifier checks authenticity and freshness of deliveries.

A delivery is accepted when:

1. the signature is valid hex,
2. it equals ``HMAC-SHA256(secret, raw_body)`` under a constant-time compare,
3. the optional timestamp (epoch milliseconds) is within ``tolerance_ms``
   of the verifier's clock.

Each failed step raises its own :class:`WebhookVerificationError` subclass.
"""
from __future__ import annotations

import binascii
import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from linear_webhooks.kernel.errors import (
    InvalidSignatureError,
    MalformedPayloadError,
    MalformedSignatureError,
    StaleTimestampError,
    WebhookVerificationError,
)
from linear_webhooks.kernel.time import Clock, SystemClock
from linear_webhooks.kernel.types import Err, Ok, Result
from linear_webhooks.security.hmac import hmac_sha256, timing_safe_equal
from linear_webhooks.webhooks.constants import DEFAULT_TOLERANCE_MS, TIMESTAMP_FIELD

if TYPE_CHECKING:
    from linear_webhooks.webhooks.settings import WebhookSettings

__all__ = ["WebhookVerifier"]


class WebhookVerifier:
    """Verifies webhook deliveries signed with a pre-shared secret.

    The verifier holds no mutable state; one instance can serve concurrent
    requests.

    Args:
        secret: Shared secret. ``str`` values are encoded as UTF-8.
        clock: Time source for the freshness check (defaults to ``SystemClock``).
        tolerance_ms: Maximum accepted ``|now - timestamp|`` in milliseconds.
    """

    __slots__ = ("_clock", "_secret", "_tolerance_ms")

    def __init__(
        self,
        secret: str | bytes,
        *,
        clock: Clock | None = None,
        tolerance_ms: int = DEFAULT_TOLERANCE_MS,
    ) -> None:
        if tolerance_ms <= 0:
            raise ValueError("tolerance_ms must be positive")
        self._secret = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
        self._clock: Clock = clock or SystemClock()
        self._tolerance_ms = tolerance_ms

    @classmethod
    def from_settings(cls, settings: WebhookSettings, *, clock: Clock | None = None) -> WebhookVerifier:
        return cls(settings.secret, clock=clock, tolerance_ms=settings.tolerance_ms)

    @property
    def tolerance_ms(self) -> int:
        return self._tolerance_ms

    def __repr__(self) -> str:
        return f"WebhookVerifier(tolerance_ms={self._tolerance_ms})"

    def verify(
        self,
        raw_body: bytes,
        signature: str | bytes | None,
        timestamp: int | None = None,
    ) -> bool:
        """Verify *signature* over *raw_body* and, if given, the freshness of *timestamp*.

        Returns ``True`` on success; every failure raises.

        Raises:
            MalformedSignatureError: *signature* is missing or not valid hex
                (``str`` or ASCII ``bytes``).
            InvalidSignatureError: *signature* does not match the body digest.
            StaleTimestampError: *timestamp* is more than ``tolerance_ms`` away from now.
        """
        expected = self._decode_signature(signature)
        digest = hmac_sha256(self._secret, raw_body)
        if len(digest) != len(expected):
            raise InvalidSignatureError()
        if not timing_safe_equal(digest, expected):
            raise InvalidSignatureError()
        self.verify_timestamp(timestamp)
        return True

    def check(
        self,
        raw_body: bytes,
        signature: str | bytes | None,
        timestamp: int | None = None,
    ) -> Result[bool, WebhookVerificationError]:
        """Like :meth:`verify` but returns ``Ok(True)`` or ``Err(error)`` instead of raising."""
        try:
            return Ok(self.verify(raw_body, signature, timestamp))
        except WebhookVerificationError as exc:
            return Err(exc)

    def parse(self, raw_body: bytes, signature: str | bytes | None) -> dict[str, Any]:
        """Verify *raw_body*, decode it and check its ``webhookTimestamp`` field.

        The signature is checked before the body is decoded. Returns the
        decoded JSON object.

        Raises:
            MalformedPayloadError: the body is not a JSON object, or the
                timestamp field is present but not an integer.
        """
        self.verify(raw_body, signature)
        payload = decode_payload(raw_body)
        self.verify_timestamp(payload_timestamp(payload))
        return payload

    def verify_timestamp(self, timestamp: int | None) -> None:
        """Raise ``StaleTimestampError`` if *timestamp* is outside the window.

        ``None`` and ``0`` mean no timestamp was supplied and pass.
        """
        if not timestamp:
            return
        delta_ms = abs(self._clock.millis() - timestamp)
        if delta_ms > self._tolerance_ms:
            raise StaleTimestampError(
                timestamp=timestamp,
                delta_ms=delta_ms,
                tolerance_ms=self._tolerance_ms,
            )

    @staticmethod
    def _decode_signature(signature: str | bytes | None) -> bytes:
        if signature is None:
            raise MalformedSignatureError("Missing webhook signature")
        try:
            raw = bytes(signature) if isinstance(signature, (bytes, bytearray)) else signature.encode("ascii")
            return binascii.unhexlify(raw)
        except (AttributeError, UnicodeEncodeError, binascii.Error) as exc:
            raise MalformedSignatureError(cause=exc) from exc


def decode_payload(raw_body: bytes) -> dict[str, Any]:
    """Decode a webhook body as a UTF-8 JSON object."""
    try:
        payload = json.loads(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedPayloadError("Webhook body is not valid JSON", cause=exc) from exc
    if not isinstance(payload, dict):
        raise MalformedPayloadError("Webhook body is not a JSON object")
    return payload


def payload_timestamp(payload: Mapping[str, Any]) -> int | None:
    """Return the ``webhookTimestamp`` field of *payload*, or ``None`` when absent."""
    value = payload.get(TIMESTAMP_FIELD)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedPayloadError(
            f"'{TIMESTAMP_FIELD}' must be an integer",
            detail={"field": TIMESTAMP_FIELD},
        )
    return value
