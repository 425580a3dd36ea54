"""
Limb store helpers and the magnitude arithmetic engine.

A magnitude is a ``list[int]`` of base-``RADIX`` limbs, least-significant
limb first, with no trailing zero limbs. The empty list is zero. Every
function here works on magnitudes only; signs are handled by ``BigInt``.
"""

import logging

from bigint.exceptions import OverflowError

logger = logging.getLogger(__name__)

RADIX = 10_000
LIMB_WIDTH = 4

# Largest number of decimal digits a product may have
MAX_DIGITS = 30_009


def check_limb(value: int, operation: str) -> int:
    """
    Verify that a freshly computed limb lies in ``[0, RADIX)``.

    Args:
        value: The limb value
        operation: Name of the operation, reported in the error

    Returns:
        The validated limb

    Raises:
        OverflowError: If the limb is out of range
    """
    if value < 0 or value >= RADIX:
        logger.debug("limb %d out of range during %s", value, operation)
        raise OverflowError(operation, value)
    return value


def strip(limbs: list[int]) -> list[int]:
    """Remove trailing zero limbs in place and return the same list."""
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def from_int(magnitude: int) -> list[int]:
    """Split a non-negative integer into limbs by repeated division."""
    limbs = []
    while magnitude > 0:
        magnitude, limb = divmod(magnitude, RADIX)
        limbs.append(limb)
    return limbs


def to_int(limbs: list[int]) -> int:
    value = 0
    for limb in reversed(limbs):
        value = value * RADIX + limb
    return value


def parse_digits(digits: str) -> list[int]:
    """
    Group a string of ASCII digits into limbs.

    Chunks of ``LIMB_WIDTH`` digits are taken from the least-significant
    end; the most-significant chunk may be shorter.

    Raises:
        OverflowError: If an accumulated chunk leaves the radix range
    """
    limbs = []
    for end in range(len(digits), 0, -LIMB_WIDTH):
        chunk = 0
        for char in digits[max(0, end - LIMB_WIDTH) : end]:
            chunk = check_limb(chunk * 10 + (ord(char) - ord("0")), "parsing")
        limbs.append(chunk)
    return strip(limbs)


def render(limbs: list[int]) -> str:
    """Render a magnitude as decimal text, zero-padding all but the top limb."""
    if not limbs:
        return "0"
    head = str(limbs[-1])
    tail = "".join(f"{limb:0{LIMB_WIDTH}d}" for limb in reversed(limbs[:-1]))
    return head + tail


def digit_count(limbs: list[int]) -> int:
    """Number of decimal digits in a magnitude; zero has one digit."""
    if not limbs:
        return 1
    return (len(limbs) - 1) * LIMB_WIDTH + len(str(limbs[-1]))


def check_digit_count(limbs: list[int], operation: str, *operands: object) -> list[int]:
    """
    Enforce the ``MAX_DIGITS`` ceiling on a result.

    Raises:
        OverflowError: If the result has more than ``MAX_DIGITS`` digits
    """
    count = digit_count(limbs)
    if count > MAX_DIGITS:
        logger.debug("%s result has %d digits, limit is %d", operation, count, MAX_DIGITS)
        raise OverflowError(operation, *operands)
    return limbs


def compare(a: list[int], b: list[int]) -> int:
    """
    Compare two magnitudes.

    Canonical magnitudes with more limbs are larger, so only equal-length
    inputs need a limb-by-limb scan from the most-significant end.

    Returns:
        -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def add_into(target: list[int], other: list[int]) -> list[int]:
    """
    Add ``other`` to ``target`` in place with carry propagation.

    ``target`` is first extended by one limb beyond the longer operand so
    a final carry always has somewhere to land.
    """
    required = max(len(target), len(other)) + 1
    target.extend([0] * (required - len(target)))

    carry = 0
    for i in range(len(target)):
        value = target[i] + carry + (other[i] if i < len(other) else 0)
        carry = 1 if value >= RADIX else 0
        target[i] = check_limb(value - carry * RADIX, "addition")

    return strip(target)


def subtract_from(target: list[int], other: list[int]) -> list[int]:
    """
    Subtract ``other`` from ``target`` in place with borrow propagation.

    Requires ``compare(target, other) >= 0``.
    """
    borrow = 0
    i = 0
    while i < len(other) or borrow:
        value = target[i] - borrow - (other[i] if i < len(other) else 0)
        borrow = 1 if value < 0 else 0
        target[i] = check_limb(value + borrow * RADIX, "subtraction")
        i += 1

    return strip(target)


def multiply(a: list[int], b: list[int]) -> list[int]:
    """
    Schoolbook product of two magnitudes.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Zero: multiply(a, []) == []
        - Size: len(multiply(a, b)) <= len(a) + len(b)
    """
    result = [0] * (len(a) + len(b))

    for i, limb in enumerate(a):
        carry = 0
        j = 0
        # The carry chain keeps running past len(b) until it is absorbed
        while j < len(b) or carry:
            value = result[i + j] + limb * (b[j] if j < len(b) else 0) + carry
            result[i + j] = check_limb(value % RADIX, "multiplication")
            carry = value // RADIX
            j += 1

    return strip(result)


def divide(dividend: list[int], divisor: list[int]) -> tuple[list[int], list[int]]:
    """
    Long division of magnitudes, one quotient limb per dividend limb.

    Each quotient limb is the largest ``digit`` in ``[0, RADIX)`` with
    ``divisor * digit <= remainder``, found by binary search.

    Args:
        dividend: Magnitude to divide
        divisor: Non-zero magnitude to divide by

    Returns:
        ``(quotient, remainder)`` with ``dividend == divisor * quotient + remainder``
        and ``remainder < divisor``
    """
    quotient = [0] * len(dividend)
    remainder: list[int] = []

    for i in range(len(dividend) - 1, -1, -1):
        remainder.insert(0, dividend[i])
        strip(remainder)

        low, high = 0, RADIX
        digit = 0
        while low <= high:
            mid = (low + high) // 2
            if compare(multiply(divisor, from_int(mid)), remainder) <= 0:
                digit = mid
                low = mid + 1
            else:
                high = mid - 1

        quotient[i] = check_limb(digit, "division")
        subtract_from(remainder, multiply(divisor, from_int(digit)))

    return strip(quotient), remainder
