"""Testing generators – Hypothesis strategies."""
from linear_webhooks.testing.generators.strategies import (
    raw_body_strategy,
    signed_delivery_strategy,
    webhook_secret_strategy,
)

__all__ = ["raw_body_strategy", "signed_delivery_strategy", "webhook_secret_strategy"]
