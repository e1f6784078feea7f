"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from linear_webhooks.kernel.errors import (
    BaseError,
    InvalidSignatureError,
    MalformedPayloadError,
    MalformedSignatureError,
    StaleTimestampError,
    WebhookVerificationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_message(self) -> None:
        assert str(BaseError("oops", code="oops", detail={"x": 1})) == "oops"

    def test_default_message(self) -> None:
        assert BaseError().message == "An error occurred"

    def test_to_dict_is_json_serialisable(self) -> None:
        parsed = json.loads(json.dumps(BaseError("oops", code="oops", detail={"x": 1}).to_dict()))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_log_fields_flatten_detail(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        assert err.log_fields() == {"x": 1, "code": "oops", "reason": "oops"}

    def test_log_fields_code_wins_over_detail(self) -> None:
        err = BaseError("oops", code="oops", detail={"code": "shadow"})
        assert err.log_fields()["code"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestVerificationErrors:
    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (WebhookVerificationError, "webhook_verification_error"),
            (MalformedSignatureError, "malformed_signature"),
            (InvalidSignatureError, "invalid_signature"),
            (StaleTimestampError, "stale_timestamp"),
            (MalformedPayloadError, "malformed_payload"),
        ],
    )
    def test_default_codes(self, cls: type[BaseError], code: str) -> None:
        assert cls().code == code

    @pytest.mark.parametrize(
        "cls",
        [MalformedSignatureError, InvalidSignatureError, StaleTimestampError, MalformedPayloadError],
    )
    def test_all_are_verification_errors(self, cls: type[BaseError]) -> None:
        assert issubclass(cls, WebhookVerificationError)
        assert issubclass(cls, BaseError)

    def test_variants_are_distinguishable(self) -> None:
        assert not issubclass(InvalidSignatureError, MalformedSignatureError)
        assert not issubclass(StaleTimestampError, InvalidSignatureError)

    def test_default_messages(self) -> None:
        assert InvalidSignatureError().message == "Invalid webhook signature"
        assert StaleTimestampError().message == "Invalid webhook timestamp"
        assert MalformedSignatureError().message == "Malformed webhook signature"
        assert MalformedPayloadError().message == "Malformed webhook payload"
        assert WebhookVerificationError().message == "Webhook verification failed"

    def test_message_override_keeps_code(self) -> None:
        err = MalformedSignatureError("Missing webhook signature")
        assert err.message == "Missing webhook signature"
        assert err.code == "malformed_signature"

    def test_stale_timestamp_detail(self) -> None:
        err = StaleTimestampError(timestamp=1000, delta_ms=61_000, tolerance_ms=60_000)
        assert err.timestamp == 1000
        assert err.delta_ms == 61_000
        assert err.tolerance_ms == 60_000
        assert err.to_dict()["detail"] == {
            "timestamp": 1000,
            "delta_ms": 61_000,
            "tolerance_ms": 60_000,
        }

    def test_stale_timestamp_log_fields(self) -> None:
        err = StaleTimestampError(timestamp=1000, delta_ms=61_000, tolerance_ms=60_000)
        assert err.log_fields() == {
            "timestamp": 1000,
            "delta_ms": 61_000,
            "tolerance_ms": 60_000,
            "code": "stale_timestamp",
            "reason": "Invalid webhook timestamp",
        }

    def test_caught_as_single_family(self) -> None:
        with pytest.raises(WebhookVerificationError):
            raise StaleTimestampError()
