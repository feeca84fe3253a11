"""Tests for arbitrary-precision integers."""

import random

import pytest

from sharevote.arith import bigint
from sharevote.arith.bigint import ONE, ZERO, BigInt
from sharevote.errors import MalformedNumberError


def test_parse_and_render():
    assert BigInt.from_decimal_string("42").to_decimal_string() == "42"
    assert BigInt.from_decimal_string("-42").to_decimal_string() == "-42"


def test_canonical_form():
    assert str(BigInt.from_decimal_string("00042")) == "42"
    assert str(BigInt.from_decimal_string("-000123")) == "-123"
    assert str(BigInt.from_decimal_string("-0")) == "0"
    assert str(BigInt.from_decimal_string("0000")) == "0"


@pytest.mark.parametrize("text", ["", "-", "+5", " 5", "5 ", "1.0", "abc", "1_000", "0x10", "١٢"])
def test_malformed(text):
    with pytest.raises(MalformedNumberError):
        BigInt.from_decimal_string(text)


def test_malformed_is_value_error():
    with pytest.raises(ValueError):
        BigInt.from_decimal_string("12a")


def test_long_numbers_round_trip():
    """Values far beyond the interpreter's int/str digit limit."""
    text = "9" + "0123456789" * 600
    assert BigInt.from_decimal_string(text).to_decimal_string() == text
    neg = "-" + text
    assert BigInt.from_decimal_string(neg).to_decimal_string() == neg


def test_limb_boundaries():
    assert str(BigInt(10**9)) == "1000000000"
    assert str(BigInt(-(10**9))) == "-1000000000"
    assert str(BigInt(10**18 + 7)) == "1000000000000000007"


def test_from_small_integer():
    assert int(BigInt.from_small_integer(-(2**63))) == -(2**63)
    assert int(BigInt.from_small_integer(2**63 - 1)) == 2**63 - 1


def test_rejects_non_int():
    with pytest.raises(TypeError):
        BigInt(True)
    with pytest.raises(TypeError):
        BigInt("5")


def test_immutable():
    a = BigInt(5)
    with pytest.raises(AttributeError):
        a._value = 6


def test_multiply_signs():
    a, b = BigInt(-3), BigInt(4)
    assert bigint.multiply(a, b) == BigInt(-12)
    assert bigint.multiply(a, a) == BigInt(9)
    assert bigint.multiply(b, b) == BigInt(16)


def test_subtract_is_add_negate():
    a, b = BigInt(10), BigInt(25)
    assert bigint.subtract(a, b) == bigint.add(a, bigint.negate(b)) == BigInt(-15)
    assert a - b == BigInt(-15)


def test_negate_zero():
    assert bigint.negate(ZERO) == ZERO
    assert str(-ZERO) == "0"


def test_equality_and_hash():
    a = BigInt.from_decimal_string("123456789012345678901234567890")
    b = BigInt(123456789012345678901234567890)
    assert bigint.equals(a, b)
    assert a == b and hash(a) == hash(b)
    assert {a: 1}[b] == 1
    assert a != BigInt(1)


def test_arithmetic_laws():
    rng = random.Random(1234)
    for _ in range(50):
        a, b, c = (BigInt(rng.randint(-(10**40), 10**40)) for _ in range(3))
        assert a + b == b + a
        assert a * b == b * a
        assert (a + b) + c == a + (b + c)
        assert (a * b) * c == a * (b * c)
        assert a + ZERO == a
        assert a * ONE == a
        assert a * ZERO == ZERO
        assert -(-a) == a


def test_mixed_int_operands():
    assert BigInt(2) + 3 == BigInt(5)
    assert 3 * BigInt(2) == BigInt(6)
    assert BigInt(7) == 7
