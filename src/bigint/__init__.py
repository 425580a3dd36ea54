"""
Arbitrary-precision signed integers built on base-10000 limbs.

This package provides:
- BigInt, a mutable value type with the full arithmetic operator set
- Truncating division with remainder following the dividend's sign
- Explicit overflow and division-by-zero errors
- A functional API and text stream helpers
"""

import logging

from bigint.core import BigInt
from bigint.exceptions import (
    BigIntError,
    DivisionByZeroError,
    InvalidFormatError,
    InvalidInputError,
    OutOfRangeError,
    OverflowError,
)
from bigint.limbs import LIMB_WIDTH, MAX_DIGITS, RADIX
from bigint.operations import (
    absolute,
    add,
    compare,
    divide,
    divide_with_remainder,
    modulo,
    multiply,
    negate,
    subtract,
)
from bigint.streams import read, read_all, write
from bigint.validators import (
    validate_decimal_string,
    validate_divisor,
    validate_integer,
    validate_range,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LIMB_WIDTH",
    "MAX_DIGITS",
    "RADIX",
    "BigInt",
    "BigIntError",
    "DivisionByZeroError",
    "InvalidFormatError",
    "InvalidInputError",
    "OutOfRangeError",
    "OverflowError",
    "absolute",
    "add",
    "compare",
    "divide",
    "divide_with_remainder",
    "modulo",
    "multiply",
    "negate",
    "read",
    "read_all",
    "subtract",
    "validate_decimal_string",
    "validate_divisor",
    "validate_integer",
    "validate_range",
    "write",
]

__version__ = "0.1.0"
