"""Config validation errors.

Values of secret settings are never echoed back: the message and
``detail`` carry the setting name and the reason only.
"""
from linear_webhooks.kernel.errors import BaseError
from linear_webhooks.observability.logging.filters import SensitiveFieldsFilter


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"
    default_message = "Invalid configuration"


class MissingRequiredSettingError(ConfigError):
    """A required setting has no value in the environment."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. an empty secret or a non-positive tolerance."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, *, secret: bool = False) -> None:
        shown = SensitiveFieldsFilter.REDACTED if secret else repr(value)
        super().__init__(
            f"Setting '{setting_name}' has invalid value {shown}: {reason}",
            detail={"setting": setting_name, "reason": reason, "masked": secret},
        )
        self.setting_name = setting_name
        self.value = None if secret else value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
