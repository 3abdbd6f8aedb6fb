# pwentropy

Measure how strong a password is, in bits of entropy. Reject passwords that
fall below a threshold you choose, with a message that says how the password
could be made stronger.

The package has no fixed list of rules such as "must contain a digit".
Instead the password gets an entropy score, and you decide how many bits are
enough. A minimum somewhere between 50 and 70 bits suits most uses.

## Checking a password

```python
from pwentropy.validate import InsecurePasswordError, validate

password = "password"
try:
    validate(password, 60)
except InsecurePasswordError as exc:
    print(exc)
```

`validate(password, min_entropy)` returns `None` when the password's entropy
is at least `min_entropy`. Otherwise it raises `InsecurePasswordError`, which
is a subclass of `ValueError`. The error message is safe to show to the person
choosing the password. For the example above it is:

```
insecure password, try including more special characters, using uppercase letters, using numbers or using a longer password
```

The message gives these hints, in this order:

- "including more special characters", unless the password uses all three
  special groups (common substitutions, separators and other specials);
- "using lowercase letters", if there are no lowercase letters;
- "using uppercase letters", if there are no uppercase letters;
- "using numbers", if there are no digits.

When none of these hints applies, the message is
`insecure password, try using a longer password`.

## Getting the score

```python
from pwentropy.entropy import get_entropy

password = "password"
bits = get_entropy(password)
```

`get_entropy` returns `log2(base ** length)` as a float. It uses the base and
length described below.

The same module also has two helpers:

- `log_x(base, n)` returns the logarithm of `n` in `base`. It returns 0 when
  `base` is 0.
- `log_pow(exp_base, power, log_base)` returns
  `log_{log_base}(exp_base ** power)` without computing the power itself.

## How the score is computed

**Base** is the size of the alphabet the password draws from. Each group of
characters that the password uses at least once adds its full size:

| Group                  | Characters                     | Size |
|------------------------|--------------------------------|------|
| Common substitutions   | `!@$&*`                        | 5    |
| Separators             | `_-., ` (including space)      | 5    |
| Other specials         | `"#%'()+/:;<=>?[\]^{\|}~`      | 22   |
| Lowercase letters      | `a`–`z`                        | 26   |
| Uppercase letters      | `A`–`Z`                        | 26   |
| Digits                 | `0`–`9`                        | 10   |

Any other character, such as an accented letter or a symbol from another
script, adds one to the base for each distinct character.

`pwentropy.base.get_base(password)` returns this number.
`pwentropy.base.classify(char)` returns the group string that holds a
character, or `None` if no group holds it. The groups are available as
`pwentropy.base.CHAR_CLASSES`.

**Length** is the password's length after predictable runs are shortened:

- A character repeated more than twice in a row counts only twice, so `aaaa`
  counts as `aa`.
- A run of more than two characters taken in order from one of the sequences
  below counts only its first two characters, so `12345678` counts as `12`.
  The sequences are `0123456789`, the keyboard rows `qwertyuiop`, `asdfghjkl`
  and `zxcvbnm`, and the alphabet, each read forwards or backwards.

The remaining characters are counted in UTF-8 bytes, so a non-ASCII
character adds more than one to the length.

`pwentropy.length.get_length(password)` returns this effective length. The
same module has the helpers that do the individual steps:
`remove_more_than_two_repeating_chars`, `remove_more_than_two_from_sequence`
and `get_reversed_string`.

## What it does not do

pwentropy is a library only. It has no command-line tool. It does not check
passwords against lists of common or leaked passwords or dictionary words.

## Requirements

Python 3.10 or later. No third-party dependencies.