"""Share and Point records.

A ``Share`` is what a parser hands over: an identifier plus an encoded y.
A ``Point`` is the same share with y decoded into a ``BigInt``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple

from sharevote.arith import radix
from sharevote.arith.bigint import BigInt


class Point(NamedTuple):
    x: int
    y: BigInt


@dataclass(frozen=True)
class Share:
    x: int
    base: int
    digits: str

    def to_point(self) -> Point:
        return Point(self.x, decode_share(self.base, self.digits))


def decode_share(base: int, digits: str) -> BigInt:
    """Decode the y value of a share."""
    return radix.decode(digits, base)


def to_points(shares: Iterable[Share]) -> List[Point]:
    """Decode *shares* in order."""
    return [s.to_point() for s in shares]


def make_points(pairs: Iterable[tuple]) -> List[Point]:
    """Build points from plain ``(x, y)`` pairs; ints are wrapped."""
    return [Point(x, BigInt.coerce(y)) for x, y in pairs]
