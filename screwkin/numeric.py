"""Scalar helpers: a Park-Miller generator, combinatorics, polynomials and vector statistics."""

from __future__ import annotations

import math
from datetime import datetime
from functools import reduce
from typing import Sequence

import numpy as np

__all__ = [
    "ParkMillerRandom",
    "r8_choose",
    "r8_factorial2",
    "r8_factorial2_values",
    "r8_log_2",
    "r8_mop",
    "poly_value_horner",
    "format_poly",
    "linspace",
    "vec_max",
    "vec_mean",
    "vec_min",
    "format_vec",
    "vec_variance",
    "timestamp",
]

_I4_HUGE = 2147483647
_SCALE = 4.656612875e-10

_FACTORIAL2_TABLE = (
    (0, 1.0),
    (1, 1.0),
    (2, 2.0),
    (3, 3.0),
    (4, 8.0),
    (5, 15.0),
    (6, 48.0),
    (7, 105.0),
    (8, 384.0),
    (9, 945.0),
    (10, 3840.0),
    (11, 10395.0),
    (12, 46080.0),
    (13, 135135.0),
    (14, 645120.0),
    (15, 2027025.0),
)


def _round_half_away(x: float) -> int:
    if x >= 0.0:
        return int(math.floor(x + 0.5))
    return -int(math.floor(-x + 0.5))


def _to_float32(x: float) -> float:
    return float(np.float32(x))


class ParkMillerRandom:
    """Minimal-standard generator: ``seed = 16807 * seed mod (2**31 - 1)``.

    The current state is kept in :attr:`seed` and advances with every draw.
    """

    def __init__(self, seed: int) -> None:
        self.seed = int(seed)

    def _advance(self) -> int:
        seed = self.seed
        k = abs(seed) // 127773
        if seed < 0:
            k = -k
        seed = 16807 * (seed - k * 127773) - k * 2836
        if seed < 0:
            seed += _I4_HUGE
        self.seed = seed
        return seed

    def uniform_01(self) -> float:
        """Next value, strictly between 0 and 1 for a non-zero seed."""
        return float(self._advance()) * _SCALE

    def uniform_int(self, a: int, b: int) -> int:
        """Next integer uniformly distributed between ``a`` and ``b`` inclusive."""
        if self.seed == 0:
            raise ValueError("seed must not be 0")
        a, b = int(a), int(b)
        if b < a:
            a, b = b, a
        r = _to_float32(_to_float32(float(self._advance())) * _SCALE)
        r = _to_float32(
            (1.0 - r) * (_to_float32(a) - 0.5) + r * (_to_float32(b) + 0.5)
        )
        return min(max(_round_half_away(r), a), b)


def r8_choose(n: int, k: int) -> float:
    """Binomial coefficient C(n, k) computed in floating point; 0 when out of range."""
    if k < n - k:
        mn, mx = k, n - k
    else:
        mn, mx = n - k, k
    if mn < 0:
        return 0.0
    if mn == 0:
        return 1.0
    value = float(mx + 1)
    for i in range(2, mn + 1):
        value = (value * float(mx + i)) / float(i)
    return value


def r8_factorial2(n: int) -> float:
    """Double factorial ``n!!``; 1.0 for ``n < 1``."""
    value = 1.0
    while n > 1:
        value *= float(n)
        n -= 2
    return value


def r8_factorial2_values() -> tuple[tuple[int, float], ...]:
    """Reference pairs ``(n, n!!)`` for ``n`` from 0 to 15."""
    return _FACTORIAL2_TABLE


def r8_log_2(x: float) -> float:
    """Base-2 logarithm of ``|x|``; ``-inf`` for zero."""
    if x == 0.0:
        return -math.inf
    return math.log(abs(x)) / math.log(2.0)


def r8_mop(i: int) -> float:
    """``(-1) ** i`` as a float."""
    return 1.0 if i % 2 == 0 else -1.0


def poly_value_horner(coeffs: Sequence[float], x: float) -> float:
    """Evaluate ``c0 + c1 x + ... + cm x**m`` by Horner's method."""
    values = [float(c) for c in coeffs]
    if not values:
        raise ValueError("at least one coefficient is required")
    return reduce(lambda acc, c: acc * x + c, reversed(values[:-1]), values[-1])


def _term(mag: float, power: int) -> str:
    if power >= 2:
        return f"{mag:14g} * x ^ {power}\n"
    if power == 1:
        return f"{mag:14g} * x\n"
    return f"{mag:14g}\n"


def format_poly(coeffs: Sequence[float], title: str) -> str:
    """Render a polynomial, highest power first, under a title.

    ``coeffs[0]`` is the constant term. A polynomial of degree 0 or less is
    shown as ``p(x) = 0``.
    """
    values = [float(c) for c in coeffs]
    degree = len(values) - 1
    parts = ["\n", f"{title}\n", "\n"]
    if degree <= 0:
        parts.append("  p(x) = 0\n")
        return "".join(parts)
    lead = values[degree]
    sign = "-" if lead < 0.0 else " "
    parts.append("  p(x) = " + sign + _term(abs(lead), degree))
    for power in range(degree - 1, -1, -1):
        coef = values[power]
        mag = abs(coef)
        if mag != 0.0:
            sign = "-" if coef < 0.0 else "+"
            parts.append("         " + sign + _term(mag, power))
    return "".join(parts)


def linspace(n: int, a_first: float, a_last: float) -> list[float]:
    """``n`` evenly spaced values from ``a_first`` to ``a_last``; the midpoint when ``n == 1``."""
    if n == 1:
        return [(a_first + a_last) / 2.0]
    return [
        (float(n - 1 - i) * a_first + float(i) * a_last) / float(n - 1)
        for i in range(max(n, 0))
    ]


def vec_max(values: Sequence[float]) -> float:
    """Largest entry, or 0.0 for an empty sequence."""
    return max((float(v) for v in values), default=0.0)


def vec_min(values: Sequence[float]) -> float:
    """Smallest entry, or 0.0 for an empty sequence."""
    return min((float(v) for v in values), default=0.0)


def vec_mean(values: Sequence[float]) -> float:
    """Arithmetic mean of the entries."""
    data = [float(v) for v in values]
    if not data:
        raise ValueError("mean of an empty sequence")
    return sum(data) / float(len(data))


def vec_variance(values: Sequence[float]) -> float:
    """Sample variance (divided by ``n - 1``); 0.0 for fewer than two entries."""
    data = [float(v) for v in values]
    if len(data) < 2:
        return 0.0
    mean = vec_mean(data)
    return sum((v - mean) * (v - mean) for v in data) / float(len(data) - 1)


def format_vec(values: Sequence[float], title: str) -> str:
    """Render a vector as indexed lines under a title."""
    lines = ["\n", f"{title}\n", "\n"]
    lines.extend(f"  {i:8d}: {float(v):14g}\n" for i, v in enumerate(values))
    return "".join(lines)


def timestamp() -> str:
    """Current local time formatted like ``31 May 2001 09:45:54 AM``."""
    return datetime.now().strftime("%d %B %Y %I:%M:%S %p")