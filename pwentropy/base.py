"""Size of the character pool a password draws from."""

REPLACE_CHARS = "!@$&*"
SEP_CHARS = "_-., "
OTHER_SPECIAL_CHARS = "\"#%'()+/:;<=>?[\\]^{|}~"
LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS_CHARS = "0123456789"

CHAR_CLASSES = (
    REPLACE_CHARS,
    SEP_CHARS,
    OTHER_SPECIAL_CHARS,
    LOWER_CHARS,
    UPPER_CHARS,
    DIGITS_CHARS,
)


def classify(char: str) -> str | None:
    """Return the known character class holding ``char``, or None."""
    return next((group for group in CHAR_CLASSES if char in group), None)


def get_base(password: str) -> int:
    """Return the number of possible characters each position may hold.

    Every known class that appears contributes its full size; each
    distinct character outside the known classes adds one.
    """
    distinct = set(password)
    classes = {classify(c) for c in distinct}
    unknown = sum(1 for c in distinct if classify(c) is None)
    return unknown + sum(len(group) for group in classes if group is not None)