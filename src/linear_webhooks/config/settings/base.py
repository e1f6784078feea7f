"""Config settings – Settings base class with secret-aware fields."""
from __future__ import annotations

import dataclasses
from typing import Any

from linear_webhooks.config.validation import InvalidSettingValueError
from linear_webhooks.observability.logging.filters import SensitiveFieldsFilter

REDACTED = SensitiveFieldsFilter.REDACTED


def secret_field(**kwargs: Any) -> Any:
    """Declare a field whose value must never appear in ``repr``, errors or logs."""
    return dataclasses.field(repr=False, metadata={"secret": True}, **kwargs)


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Field ``name`` is read from ``<_prefix>_<NAME>``. Fields declared with
    :func:`secret_field` are masked by :meth:`redacted` and in validation
    errors.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, name: str) -> str:
        return f"{cls._prefix}_{name}".upper().lstrip("_")

    @classmethod
    def is_secret(cls, name: str) -> bool:
        return any(f.name == name and f.metadata.get("secret", False) for f in dataclasses.fields(cls))

    def redacted(self) -> dict[str, Any]:
        """Field values with secrets masked, safe to log at startup."""
        return {
            f.name: REDACTED if f.metadata.get("secret") else getattr(self, f.name)
            for f in dataclasses.fields(self)
        }

    def _require(self, name: str, ok: bool, reason: str) -> None:
        if not ok:
            raise InvalidSettingValueError(
                name, getattr(self, name), reason, secret=self.is_secret(name)
            )


__all__ = ["REDACTED", "Settings", "secret_field"]
