"""Security – HMAC primitives used by webhook signing and verification."""
from linear_webhooks.security.hmac import DIGEST_SIZE, hmac_sha256, timing_safe_equal

__all__ = ["DIGEST_SIZE", "hmac_sha256", "timing_safe_equal"]
