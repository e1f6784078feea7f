"""Shared pytest configuration – registers the linear_webhooks fixtures."""

pytest_plugins = ["linear_webhooks.testing.fixtures"]
