"""Base-N digit strings <-> BigInt.

Digits ``0-9`` map to 0-9 and ``a-z`` / ``A-Z`` map to 10-35, so any
base in [2, 36] is supported.
"""

from __future__ import annotations

import string
from typing import Dict, List

from sharevote.arith.bigint import BigInt
from sharevote.config import MAX_BASE, MIN_BASE
from sharevote.errors import InvalidBaseError, InvalidDigitError

_ALPHABET = string.digits + string.ascii_lowercase

_DIGIT_VALUES: Dict[str, int] = {ch: i for i, ch in enumerate(_ALPHABET)}
_DIGIT_VALUES.update({ch.upper(): i for ch, i in _DIGIT_VALUES.items() if ch.isalpha()})


def check_base(base: int) -> int:
    """Return *base* if it lies in [MIN_BASE, MAX_BASE], else raise."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(f"Base {base} outside [{MIN_BASE}, {MAX_BASE}]")
    return base


def digit_value(ch: str, base: int) -> int:
    """Value of a single digit character in *base*."""
    value = _DIGIT_VALUES.get(ch)
    if value is None:
        raise InvalidDigitError(f"Invalid digit {ch!r}")
    if value >= base:
        raise InvalidDigitError(f"Digit {ch!r} (= {value}) not valid in base {base}")
    return value


def decode(digits: str, base: int) -> BigInt:
    """Decode *digits* in *base* (Horner, most significant digit first)."""
    check_base(base)
    if not digits:
        raise InvalidDigitError("Empty digit string")
    acc = 0
    for ch in digits:
        acc = acc * base + digit_value(ch, base)
    return BigInt(acc)


def encode(value: BigInt | int, base: int) -> str:
    """Render a non-negative *value* in *base* with lowercase digits."""
    check_base(base)
    n = int(value)
    if n < 0:
        raise ValueError(f"Cannot encode negative value {n}")
    if n == 0:
        return "0"
    out: List[str] = []
    while n:
        n, rem = divmod(n, base)
        out.append(_ALPHABET[rem])
    return "".join(reversed(out))
