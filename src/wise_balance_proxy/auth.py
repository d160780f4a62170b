import hmac
from typing import Optional


def is_authorized(provided: Optional[str], expected: Optional[str]) -> bool:
    """True when the caller's user_token matches the configured one exactly."""
    if not provided or not expected:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))
