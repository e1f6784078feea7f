"""Config settings – 12-factor env-based configuration."""
from linear_webhooks.config.settings.base import REDACTED, Settings, secret_field
from linear_webhooks.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["REDACTED", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader", "secret_field"]
