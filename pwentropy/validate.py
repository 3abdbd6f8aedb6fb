"""Check a password against a minimum entropy."""

from .base import (
    DIGITS_CHARS,
    LOWER_CHARS,
    OTHER_SPECIAL_CHARS,
    REPLACE_CHARS,
    SEP_CHARS,
    UPPER_CHARS,
    classify,
)
from .entropy import get_entropy


class InsecurePasswordError(ValueError):
    """Raised when a password is too weak; the message is safe to show users."""


def validate(password: str, min_entropy: float) -> None:
    """Raise InsecurePasswordError unless the entropy reaches ``min_entropy``."""
    if get_entropy(password) >= min_entropy:
        return

    present = {classify(c) for c in password}
    hints = []
    if not {OTHER_SPECIAL_CHARS, SEP_CHARS, REPLACE_CHARS} <= present:
        hints.append("including more special characters")
    if LOWER_CHARS not in present:
        hints.append("using lowercase letters")
    if UPPER_CHARS not in present:
        hints.append("using uppercase letters")
    if DIGITS_CHARS not in present:
        hints.append("using numbers")

    if hints:
        raise InsecurePasswordError(
            f"insecure password, try {', '.join(hints)} or using a longer password"
        )
    raise InsecurePasswordError("insecure password, try using a longer password")