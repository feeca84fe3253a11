"""Prime field F_p used by the ``field`` interpolation mode.

Elements are plain ints in [0, p).  The only non-trivial operation is the
Lagrange basis weight at x = 0, which needs the x coordinates to stay
distinct after reduction mod p.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sharevote.config import FIELD_PRIME
from sharevote.errors import DegeneratePointsError


@dataclass(frozen=True)
class PrimeField:
    prime: int = FIELD_PRIME

    def reduce(self, a: int) -> int:
        return a % self.prime

    def inverse(self, a: int) -> int:
        """Multiplicative inverse (Fermat); zero has none."""
        a = self.reduce(a)
        if a == 0:
            raise ZeroDivisionError("Cannot invert zero in F_p")
        return pow(a, self.prime - 2, self.prime)

    def check_distinct(self, xs: Sequence[int]) -> None:
        """Raise ``DegeneratePointsError`` if two x collide mod p."""
        reduced = [self.reduce(x) for x in xs]
        if len(set(reduced)) != len(reduced):
            raise DegeneratePointsError(
                f"x coordinates {list(xs)} are not distinct mod {self.prime}"
            )

    def weight_at_zero(self, xs: Sequence[int], i: int) -> int:
        """prod_{j != i} (0 - x_j) / (x_i - x_j)  in F_p."""
        p = self.prime
        num = 1
        den = 1
        for j, xj in enumerate(xs):
            if j == i:
                continue
            num = num * -xj % p
            den = den * (xs[i] - xj) % p
        return num * self.inverse(den) % p

    def interpolate_at_zero(self, xs: Sequence[int], ys: Sequence[int]) -> int:
        """P(0) mod p for the polynomial through ``(xs[i], ys[i])``."""
        self.check_distinct(xs)
        p = self.prime
        return sum(y * self.weight_at_zero(xs, i) for i, y in enumerate(ys)) % p
