"""Arbitrary-precision signed integer value type."""

from __future__ import annotations

from typing import Any, Union

from bigint.limbs import (
    add_into,
    check_digit_count,
    compare,
    digit_count,
    divide,
    from_int,
    multiply,
    parse_digits,
    render,
    strip,
    subtract_from,
    to_int,
)
from bigint.validators import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    validate_decimal_string,
    validate_divisor,
    validate_integer,
    validate_range,
)

Operand = Union["BigInt", int]


def _coerce(value: Any) -> BigInt | None:
    """Turn an int into a BigInt; None for unsupported operand types."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt(value)
    return None


class BigInt:
    """
    An arbitrary-precision signed integer.

    The magnitude is a list of base-10000 limbs, least-significant first,
    kept in canonical form: no trailing zero limbs, and zero is the empty
    list with a non-negative sign.

    Instances are mutable. In-place operators (``+=``, ``-=``, ``*=``,
    ``/=``, ``//=``, ``%=``) update the receiver; binary operators work on
    a copy and never touch their operands. Because of that, BigInt is not
    hashable. Use ``copy()`` for an independent value and ``move()`` to
    hand the limbs over and leave the source at zero.

    Division truncates toward zero and the remainder takes the sign of
    the dividend, so ``/`` and ``//`` are the same operation.

    Example:
        >>> a = BigInt("123456789012345678901234567890")
        >>> str(a + 1)
        '123456789012345678901234567891'
        >>> BigInt(-7) / 2, BigInt(-7) % 2
        (BigInt('-3'), BigInt('-1'))
    """

    def __init__(self, value: int | str | BigInt = 0) -> None:
        """
        Initialize from an int, a decimal string or another BigInt.

        Args:
            value: Source value; strings must match ``[+-]?[0-9]+``

        Raises:
            InvalidInputError: If value has an unsupported type
            InvalidFormatError: If a string is malformed
        """
        if isinstance(value, BigInt):
            self._limbs = list(value._limbs)
            self._negative = value._negative
        elif isinstance(value, str):
            validate_decimal_string(value)
            self._negative = value[0] == "-"
            self._limbs = parse_digits(value.lstrip("+-"))
            self._normalize()
        else:
            validate_integer(value)
            self._negative = value < 0
            self._limbs = from_int(abs(value))

    @classmethod
    def from_int32(cls, value: int) -> BigInt:
        """Construct from a value that must fit a signed 32-bit integer."""
        return cls(validate_range(value, INT32_MIN, INT32_MAX))

    @classmethod
    def from_int64(cls, value: int) -> BigInt:
        """Construct from a value that must fit a signed 64-bit integer."""
        return cls(validate_range(value, INT64_MIN, INT64_MAX))

    @classmethod
    def _from_parts(cls, limbs: list[int], negative: bool) -> BigInt:
        """Wrap an existing limb list without copying it."""
        result = cls.__new__(cls)
        result._limbs = limbs
        result._negative = negative
        result._normalize()
        return result

    def _normalize(self) -> None:
        strip(self._limbs)
        if not self._limbs:
            self._negative = False

    def _assign(self, other: BigInt) -> None:
        self._limbs = other._limbs
        self._negative = other._negative

    def _operand(self, other: Any) -> BigInt | None:
        """Coerce the right-hand side, copying it when it aliases self."""
        if other is self:
            return self.copy()
        return _coerce(other)

    @property
    def limbs(self) -> tuple[int, ...]:
        """Limbs of the magnitude, least-significant first."""
        return tuple(self._limbs)

    @property
    def is_negative(self) -> bool:
        return self._negative

    def digit_count(self) -> int:
        """Number of decimal digits in the magnitude (zero has one)."""
        return digit_count(self._limbs)

    def copy(self) -> BigInt:
        """Create an independent copy of this value."""
        return BigInt(self)

    def move(self) -> BigInt:
        """Transfer the limbs to a new value and reset this one to zero."""
        moved = BigInt._from_parts(self._limbs, self._negative)
        self._limbs = []
        self._negative = False
        return moved

    def absolute(self) -> BigInt:
        return BigInt._from_parts(list(self._limbs), False)

    # Unary operators

    def __pos__(self) -> BigInt:
        return self.copy()

    def __neg__(self) -> BigInt:
        return BigInt._from_parts(list(self._limbs), not self._negative)

    def __abs__(self) -> BigInt:
        return self.absolute()

    # In-place arithmetic

    def __iadd__(self, other: Operand) -> BigInt:
        other = self._operand(other)
        if other is None:
            return NotImplemented

        # A zero operand takes this branch too; negating it cannot flip the sign
        if self._negative == other._negative or not other._limbs:
            add_into(self._limbs, other._limbs)
        else:
            self -= -other

        self._normalize()
        return self

    def __isub__(self, other: Operand) -> BigInt:
        other = self._operand(other)
        if other is None:
            return NotImplemented

        if self._negative == other._negative or not other._limbs:
            if compare(self._limbs, other._limbs) >= 0:
                subtract_from(self._limbs, other._limbs)
            else:
                # |self| < |other|: one more step with the operands swapped
                self._assign(-(other - self))
        else:
            self += -other

        self._normalize()
        return self

    def __imul__(self, other: Operand) -> BigInt:
        other = self._operand(other)
        if other is None:
            return NotImplemented

        product = multiply(self._limbs, other._limbs)
        check_digit_count(
            product, "multiplication", self.digit_count(), other.digit_count()
        )
        self._assign(BigInt._from_parts(product, self._negative != other._negative))
        return self

    def _divmod(self, other: BigInt) -> tuple[BigInt, BigInt]:
        """Shared division routine; quotient and remainder come from one pass."""
        validate_divisor(self, other)
        quotient, remainder = divide(self._limbs, other._limbs)
        return (
            BigInt._from_parts(quotient, self._negative != other._negative),
            BigInt._from_parts(remainder, self._negative),
        )

    def __itruediv__(self, other: Operand) -> BigInt:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        self._assign(self._divmod(other)[0])
        return self

    __ifloordiv__ = __itruediv__

    def __imod__(self, other: Operand) -> BigInt:
        other = self._operand(other)
        if other is None:
            return NotImplemented
        self._assign(self._divmod(other)[1])
        return self

    # Binary arithmetic, each defined through the in-place form on a copy

    def __add__(self, other: Operand) -> BigInt:
        return self.copy().__iadd__(other)

    def __sub__(self, other: Operand) -> BigInt:
        return self.copy().__isub__(other)

    def __mul__(self, other: Operand) -> BigInt:
        return self.copy().__imul__(other)

    def __truediv__(self, other: Operand) -> BigInt:
        return self.copy().__itruediv__(other)

    __floordiv__ = __truediv__

    def __mod__(self, other: Operand) -> BigInt:
        return self.copy().__imod__(other)

    def __divmod__(self, other: Operand) -> tuple[BigInt, BigInt]:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)

    def __radd__(self, other: int) -> BigInt:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other + self

    def __rsub__(self, other: int) -> BigInt:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __rmul__(self, other: int) -> BigInt:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other * self

    def __rtruediv__(self, other: int) -> BigInt:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    __rfloordiv__ = __rtruediv__

    def __rmod__(self, other: int) -> BigInt:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other % self

    def __rdivmod__(self, other: int) -> tuple[BigInt, BigInt]:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other._divmod(self)

    # Increment / decrement

    def increment(self) -> BigInt:
        """Prefix increment: add one in place and return self."""
        self += 1
        return self

    def decrement(self) -> BigInt:
        """Prefix decrement: subtract one in place and return self."""
        self -= 1
        return self

    def post_increment(self) -> BigInt:
        """Postfix increment: add one in place and return the previous value."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> BigInt:
        """Postfix decrement: subtract one in place and return the previous value."""
        previous = self.copy()
        self.decrement()
        return previous

    # Comparison

    def _less_than(self, other: BigInt) -> bool:
        if self._negative != other._negative:
            return self._negative
        order = compare(self._limbs, other._limbs)
        if order == 0:
            return False
        return (order < 0) != self._negative

    def __lt__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._less_than(other)

    def __le__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not other._less_than(self)

    def __gt__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other._less_than(self)

    def __ge__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self._less_than(other)

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self._less_than(other) and not other._less_than(self)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    # Conversion

    def __bool__(self) -> bool:
        return bool(self._limbs)

    def __int__(self) -> int:
        magnitude = to_int(self._limbs)
        return -magnitude if self._negative else magnitude

    def __str__(self) -> str:
        return ("-" if self._negative else "") + render(self._limbs)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __copy__(self) -> BigInt:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> BigInt:
        return self.copy()
