import math

import pytest

from pwentropy.entropy import get_entropy, log_pow, log_x


@pytest.mark.parametrize(
    "exp_base, power, log_base, expected",
    [
        (7, 8, 2, 22),
        (10, 11, 2, 37),
        (11, 17, 2, 59),
        (13, 21, 10, 23),
    ],
)
def test_log_pow_rounded(exp_base, power, log_base, expected):
    assert round(log_pow(exp_base, power, log_base)) == expected


def test_log_pow_zero_power():
    assert log_pow(26, 0, 2) == 0.0


def test_log_x_values():
    assert log_x(2, 8) == pytest.approx(3.0)
    assert log_x(10, 1000) == pytest.approx(3.0)


def test_log_x_zero_base():
    assert log_x(0, 8) == 0.0


def test_log_x_of_zero_is_negative_infinity():
    assert log_x(2, 0) == -math.inf


def test_entropy_of_empty_password():
    assert get_entropy("") == 0.0


def test_entropy_of_repeated_lowercase():
    # "aaaa" has effective length 2 over a pool of 26 characters.
    assert get_entropy("aaaa") == pytest.approx(9.4009, abs=1e-3)


def test_entropy_grows_with_more_classes():
    assert get_entropy("aGoo0dMi#oFChaR2") > get_entropy("agoodmiofchar")