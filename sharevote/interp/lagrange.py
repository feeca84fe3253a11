"""Lagrange interpolation at x = 0.

API
---
secret_at_zero(points)          -> BigInt     default ("fingerprint") mode
rational_at_zero(points)        -> BigInt | Fraction
field_at_zero(points, prime)    -> BigInt     value mod prime
interpolator_for(mode)          -> one of the above

The default mode evaluates

    S = sum_i  y_i * prod_{j != i} (-x_j)

without the per-term denominators prod_{j != i} (x_i - x_j).  S is *not*
P(0); it is a deterministic key for the point set and is only compared
against other keys.  ``rational`` and ``field`` compute the true P(0) and
are offered as explicit alternatives.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Callable, Dict, Sequence, Tuple, Union

from sharevote.arith.bigint import ONE, ZERO, BigInt
from sharevote.arith.field import PrimeField
from sharevote.config import FIELD_PRIME, resolve_mode
from sharevote.errors import DegeneratePointsError

Candidate = Union[BigInt, Fraction]
PointLike = Tuple[int, BigInt]


def _check_points(points: Sequence[PointLike]) -> None:
    if not points:
        raise DegeneratePointsError("Need at least one point")
    xs = [x for x, _ in points]
    if len(set(xs)) != len(xs):
        raise DegeneratePointsError(f"Repeated x coordinate in {sorted(xs)}")


def secret_at_zero(points: Sequence[PointLike]) -> BigInt:
    """Denominator-free Lagrange sum at x = 0 over the integers."""
    _check_points(points)
    k = len(points)
    result = ZERO
    for i in range(k):
        yi = BigInt.coerce(points[i][1])
        num = ONE
        for j in range(k):
            if j == i:
                continue
            num = num.multiply(BigInt(points[j][0]).negate())  # (0 - x_j)
        result = result.add(yi.multiply(num))
    return result


def rational_at_zero(points: Sequence[PointLike]) -> Candidate:
    """Exact P(0) over the rationals; a ``BigInt`` when it is integral."""
    _check_points(points)
    k = len(points)
    total = Fraction(0)
    for i in range(k):
        xi, yi = points[i][0], int(points[i][1])
        num = 1
        den = 1
        for j in range(k):
            if j == i:
                continue
            xj = points[j][0]
            num *= -xj
            den *= xi - xj
        total += Fraction(yi * num, den)
    if total.denominator == 1:
        return BigInt(total.numerator)
    return total


def field_at_zero(points: Sequence[PointLike], prime: int = FIELD_PRIME) -> BigInt:
    """P(0) mod *prime*; x values colliding mod *prime* are degenerate."""
    _check_points(points)
    xs = [x for x, _ in points]
    ys = [int(y) for _, y in points]
    return BigInt(PrimeField(prime).interpolate_at_zero(xs, ys))


_INTERPOLATORS: Dict[str, Callable[[Sequence[PointLike]], Candidate]] = {
    "fingerprint": secret_at_zero,
    "rational": rational_at_zero,
    "field": field_at_zero,
}


def interpolator_for(mode: str) -> Callable[[Sequence[PointLike]], Candidate]:
    """Return the interpolation function for *mode*."""
    return _INTERPOLATORS[resolve_mode(mode)]
