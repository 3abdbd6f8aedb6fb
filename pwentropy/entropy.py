"""Password entropy in bits."""

import math

from .base import get_base
from .length import get_length


def _log2(x: float) -> float:
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return math.log2(x)


def log_x(base: float, n: float) -> float:
    """Return log of ``n`` in ``base``; 0 when ``base`` is 0."""
    if base == 0:
        return 0.0
    numerator = _log2(n)
    denominator = _log2(base)
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def log_pow(exp_base: float, power: int, log_base: float) -> float:
    """Return log_{log_base}(exp_base ** power) without leaving log space."""
    term = log_x(log_base, exp_base)
    total = 0.0
    for _ in range(power):
        total += term
    return total


def get_entropy(password: str) -> float:
    """Return the entropy of ``password`` in bits."""
    return log_pow(float(get_base(password)), get_length(password), 2)