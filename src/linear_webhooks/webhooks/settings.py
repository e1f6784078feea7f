"""Webhooks – WebhookSettings loaded from ``LINEAR_WEBHOOK_*`` variables."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from linear_webhooks.config.settings import Settings, secret_field
from linear_webhooks.webhooks.constants import DEFAULT_TOLERANCE_MS, SIGNATURE_HEADER

__all__ = ["WebhookSettings"]


@dataclasses.dataclass
class WebhookSettings(Settings):
    """Verifier configuration.

    ``secret`` is a secret field: it is left out of ``repr``, masked by
    :meth:`redacted` and never echoed in validation errors.
    """

    _prefix: ClassVar[str] = "LINEAR_WEBHOOK"

    secret: str = secret_field()
    tolerance_ms: int = DEFAULT_TOLERANCE_MS
    signature_header: str = SIGNATURE_HEADER

    def _validate(self) -> None:
        self._require("secret", bool(self.secret), "must not be empty")
        self._require("tolerance_ms", self.tolerance_ms > 0, "must be positive")
        self._require("signature_header", bool(self.signature_header), "must not be empty")
