"""Testing fakes."""
from linear_webhooks.testing.fakes.clock import FAKE_NOW_MS, FakeClock, delivery_timestamp

__all__ = ["FAKE_NOW_MS", "FakeClock", "delivery_timestamp"]
