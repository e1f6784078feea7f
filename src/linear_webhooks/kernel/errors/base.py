"""Root error class: every failure carries a stable ``code`` for callers and logs."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the linear-webhooks error hierarchy.

    Subclasses set ``default_code`` and ``default_message`` and are usually
    raised without arguments. ``detail`` holds structured context that is
    safe to log; it must never carry secrets or expected digests.
    """

    default_code: str = "base_error"
    default_message: str = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict, e.g. for an HTTP rejection body."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog event: ``code``, ``reason`` and the detail."""
        return {**self.detail, "code": self.code, "reason": self.message}


__all__ = ["BaseError"]
