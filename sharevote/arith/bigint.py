"""Arbitrary-precision signed integers.

``BigInt`` is an immutable value type over Python's native ``int``.
Decimal conversion goes through base-10**9 limbs so that numbers of any
length render and parse without hitting the interpreter's int/str digit
limit.

API
---
BigInt.from_decimal_string(text) -> BigInt
BigInt.from_small_integer(n)     -> BigInt
add(a, b), negate(a), multiply(a, b), subtract(a, b), equals(a, b)
a.to_decimal_string()            -> canonical decimal text
"""

from __future__ import annotations

import re
from typing import List

from sharevote.errors import MalformedNumberError

_DECIMAL = re.compile(r"-?[0-9]+")

_LIMB_DIGITS = 9
_LIMB = 10**_LIMB_DIGITS


class BigInt:
    """Immutable arbitrary-precision signed integer."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInt needs an int, got {type(value).__name__}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("BigInt is immutable")

    # ---- construction ----

    @classmethod
    def from_decimal_string(cls, text: str) -> "BigInt":
        """Parse ``-?[0-9]+``; anything else raises ``MalformedNumberError``."""
        if not isinstance(text, str) or not _DECIMAL.fullmatch(text):
            raise MalformedNumberError(f"Not a decimal integer: {text!r}")
        negative = text.startswith("-")
        digits = text[1:] if negative else text

        # Leading chunk may be short; the rest are full limbs.
        head = len(digits) % _LIMB_DIGITS or _LIMB_DIGITS
        value = int(digits[:head])
        for i in range(head, len(digits), _LIMB_DIGITS):
            value = value * _LIMB + int(digits[i:i + _LIMB_DIGITS])
        return cls(-value if negative else value)

    @classmethod
    def from_small_integer(cls, n: int) -> "BigInt":
        return cls(n)

    @classmethod
    def coerce(cls, value: "BigInt | int") -> "BigInt":
        """Return *value* as a ``BigInt`` (ints are wrapped)."""
        if isinstance(value, BigInt):
            return value
        return cls(value)

    # ---- arithmetic ----

    def add(self, other: "BigInt") -> "BigInt":
        return BigInt(self._value + other._value)

    def negate(self) -> "BigInt":
        return BigInt(-self._value)

    def multiply(self, other: "BigInt") -> "BigInt":
        return BigInt(self._value * other._value)

    def subtract(self, other: "BigInt") -> "BigInt":
        return self.add(other.negate())

    def equals(self, other: "BigInt") -> bool:
        return self._value == other._value

    # ---- rendering ----

    def to_decimal_string(self) -> str:
        """Canonical form: no leading zeros, ``-`` iff negative, ``0`` for zero."""
        magnitude = abs(self._value)
        if magnitude < _LIMB:
            text = str(magnitude)
        else:
            limbs: List[int] = []
            while magnitude:
                magnitude, rem = divmod(magnitude, _LIMB)
                limbs.append(rem)
            text = str(limbs[-1]) + "".join(
                f"{limb:0{_LIMB_DIGITS}d}" for limb in reversed(limbs[:-1])
            )
        return "-" + text if self._value < 0 else text

    # ---- Python protocol ----

    @property
    def is_negative(self) -> bool:
        return self._value < 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __add__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            other = BigInt(other)
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            other = BigInt(other)
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            other = BigInt(other)
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __eq__(self, other) -> bool:
        if isinstance(other, BigInt):
            return self.equals(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"BigInt({self.to_decimal_string()})"


ZERO = BigInt(0)
ONE = BigInt(1)


def add(a: BigInt, b: BigInt) -> BigInt:
    """Integer addition."""
    return a.add(b)


def negate(a: BigInt) -> BigInt:
    """Additive inverse; ``negate(0) == 0``."""
    return a.negate()


def multiply(a: BigInt, b: BigInt) -> BigInt:
    """Integer multiplication."""
    return a.multiply(b)


def subtract(a: BigInt, b: BigInt) -> BigInt:
    """``add(a, negate(b))``."""
    return a.add(b.negate())


def equals(a: BigInt, b: BigInt) -> bool:
    """Value equality."""
    return a.equals(b)
