"""Testing fixtures – pytest fixtures for fake doubles."""
from linear_webhooks.testing.fixtures.clock import fake_clock
from linear_webhooks.testing.fixtures.verifier import webhook_secret, webhook_verifier

__all__ = ["fake_clock", "webhook_secret", "webhook_verifier"]
