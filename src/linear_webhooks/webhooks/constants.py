"""Webhooks – wire-level names and defaults."""

SIGNATURE_HEADER = "linear-signature"
TIMESTAMP_FIELD = "webhookTimestamp"

# One minute either side of the verifier's clock.
DEFAULT_TOLERANCE_MS = 60_000

__all__ = ["DEFAULT_TOLERANCE_MS", "SIGNATURE_HEADER", "TIMESTAMP_FIELD"]
