"""Testing support – fakes, fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["linear_webhooks.testing.fixtures"]
"""

from linear_webhooks.testing.fakes import FAKE_NOW_MS, FakeClock, delivery_timestamp
from linear_webhooks.testing.generators import (
    raw_body_strategy,
    signed_delivery_strategy,
    webhook_secret_strategy,
)

__all__ = [
    "FAKE_NOW_MS",
    "FakeClock",
    "delivery_timestamp",
    "raw_body_strategy",
    "signed_delivery_strategy",
    "webhook_secret_strategy",
]
