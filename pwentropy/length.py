"""Effective password length after discounting repeats and common runs."""

SEQ_NUMS = "0123456789"
SEQ_KEYBOARD0 = "qwertyuiop"
SEQ_KEYBOARD1 = "asdfghjkl"
SEQ_KEYBOARD2 = "zxcvbnm"
SEQ_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def remove_more_than_two_from_sequence(s: str, seq: str) -> str:
    """Drop characters that continue a run of ``seq`` beyond two."""
    chars = list(s)
    matches = 0
    i = 0
    while i < len(chars):
        for expected in seq:
            if i >= len(chars):
                break
            if chars[i] != expected:
                matches = 0
                continue
            matches += 1
            if matches > 2:
                del chars[i]
            else:
                i += 1
        i += 1
    return "".join(chars)


def get_reversed_string(s: str) -> str:
    """Return ``s`` reversed character by character."""
    return s[::-1]


def remove_more_than_two_repeating_chars(s: str) -> str:
    """Collapse any run of one character to at most two."""
    kept = []
    prev_prev = prev = "\0"
    for c in s:
        if not (c == prev == prev_prev):
            kept.append(c)
        prev_prev, prev = prev, c
    return "".join(kept)


def _byte_len(s: str) -> int:
    return len(s.encode("utf-8", "surrogatepass"))


def _strip_sequences(password: str, reverse: bool) -> str:
    def seq(text: str) -> str:
        return get_reversed_string(text) if reverse else text

    password = remove_more_than_two_from_sequence(password, seq(SEQ_NUMS))
    password = remove_more_than_two_from_sequence(password, seq(SEQ_KEYBOARD0))
    keyboard_first = remove_more_than_two_from_sequence(password, seq(SEQ_KEYBOARD1))
    alphabet_first = remove_more_than_two_from_sequence(password, seq(SEQ_ALPHABET))
    # The order of these two passes can change the result; keep the shorter.
    if _byte_len(keyboard_first) < _byte_len(alphabet_first):
        password = remove_more_than_two_from_sequence(keyboard_first, seq(SEQ_ALPHABET))
    else:
        password = remove_more_than_two_from_sequence(alphabet_first, seq(SEQ_KEYBOARD1))
    return remove_more_than_two_from_sequence(password, seq(SEQ_KEYBOARD2))


def get_length(password: str) -> int:
    """Return the effective length, in UTF-8 bytes, of ``password``."""
    password = remove_more_than_two_repeating_chars(password)
    password = _strip_sequences(password, reverse=False)
    password = _strip_sequences(password, reverse=True)
    password = remove_more_than_two_from_sequence(
        password, get_reversed_string(SEQ_ALPHABET)
    )
    return _byte_len(password)