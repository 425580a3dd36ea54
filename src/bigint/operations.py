"""Functional arithmetic API over BigInt values."""

from bigint.core import BigInt
from bigint.validators import validate_integer

Number = BigInt | int | str


def _to_bigint(value: Number) -> BigInt:
    if isinstance(value, (BigInt, str)):
        return BigInt(value)
    return BigInt(validate_integer(value))


def add(a: Number, b: Number) -> BigInt:
    """
    Add two integers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Associative: add(add(a, b), c) == add(a, add(b, c))
        - Identity: add(a, 0) == a
        - Inverse: add(a, negate(a)) == 0

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b

    Raises:
        InvalidInputError: If an operand has an unsupported type
        InvalidFormatError: If a string operand is malformed
    """
    return _to_bigint(a) + _to_bigint(b)


def subtract(a: Number, b: Number) -> BigInt:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == negate(subtract(b, a))
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0
    """
    return _to_bigint(a) - _to_bigint(b)


def multiply(a: Number, b: Number) -> BigInt:
    """
    Multiply two integers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Associative: multiply(multiply(a, b), c) == multiply(a, multiply(b, c))
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        OverflowError: If the product has more than MAX_DIGITS digits
    """
    return _to_bigint(a) * _to_bigint(b)


def divide(a: Number, b: Number) -> BigInt:
    """
    Divide a by b, truncating toward zero.

    Properties:
        - Identity: divide(a, 1) == a
        - Self-division: divide(a, a) == 1 (for a != 0)
        - Sign: divide(-a, b) == negate(divide(a, b))

    Raises:
        DivisionByZeroError: If b is zero
    """
    return _to_bigint(a) / _to_bigint(b)


def modulo(a: Number, b: Number) -> BigInt:
    """
    Remainder of truncating division; takes the sign of a.

    Properties:
        - Range: abs(modulo(a, b)) < abs(b)
        - Reconstruction: a == divide(a, b) * b + modulo(a, b)

    Raises:
        DivisionByZeroError: If b is zero
    """
    return _to_bigint(a) % _to_bigint(b)


def divide_with_remainder(a: Number, b: Number) -> tuple[BigInt, BigInt]:
    """
    Quotient and remainder from a single division.

    Returns:
        (quotient, remainder), equal to (divide(a, b), modulo(a, b))

    Raises:
        DivisionByZeroError: If b is zero
    """
    return divmod(_to_bigint(a), _to_bigint(b))


def negate(a: Number) -> BigInt:
    return -_to_bigint(a)


def absolute(a: Number) -> BigInt:
    return abs(_to_bigint(a))


def compare(a: Number, b: Number) -> int:
    """
    Three-way comparison.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b
    """
    left, right = _to_bigint(a), _to_bigint(b)
    if left < right:
        return -1
    if right < left:
        return 1
    return 0
