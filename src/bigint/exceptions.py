"""Custom exceptions for the bigint package."""

from typing import Any


class BigIntError(ArithmeticError):
    """Base exception for all bigint errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(BigIntError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: object) -> None:
        super().__init__("Division by zero", str(numerator))
        self.numerator = numerator


class OverflowError(BigIntError):
    """Raised when a limb leaves its radix range or a result grows too large."""

    def __init__(self, operation: str, *operands: object) -> None:
        super().__init__(f"Overflow in {operation}", operands or None)
        self.operation = operation
        self.operands = operands


class InvalidInputError(BigIntError):
    """Raised when an operand has an unsupported type."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, repr(value))
        self.reason = reason


class InvalidFormatError(InvalidInputError):
    """Raised when a string is not a well-formed decimal integer."""

    def __init__(self, text: str, reason: str = "Malformed decimal integer") -> None:
        super().__init__(text, reason)
        self.text = text


class OutOfRangeError(BigIntError):
    """Raised when a value is outside a fixed-width integer range."""

    def __init__(self, value: int, min_val: int | None = None, max_val: int | None = None) -> None:
        range_str = f"[{min_val}, {max_val}]"
        super().__init__(f"Value out of range {range_str}", value)
        self.min_val = min_val
        self.max_val = max_val
