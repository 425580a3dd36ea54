"""Reading and writing BigInt values on text streams."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bigint.core import BigInt
from bigint.exceptions import InvalidFormatError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO

logger = logging.getLogger(__name__)


def _next_token(stream: TextIO) -> str | None:
    """Skip whitespace and collect characters up to the next whitespace."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    if not char:
        return None

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read(stream: TextIO) -> BigInt:
    """
    Read one whitespace-delimited token and parse it.

    Args:
        stream: A text stream

    Returns:
        The parsed value

    Raises:
        InvalidFormatError: If the stream is exhausted or the token is malformed
    """
    token = _next_token(stream)
    if token is None:
        logger.debug("no token left on %r", stream)
        raise InvalidFormatError("", "Unexpected end of stream")
    return BigInt(token)


def read_all(stream: TextIO) -> Iterator[BigInt]:
    """Yield a BigInt for every token until the stream is exhausted."""
    token = _next_token(stream)
    while token is not None:
        yield BigInt(token)
        token = _next_token(stream)


def write(stream: TextIO, value: BigInt | int | str) -> None:
    """Write the canonical decimal form of value, without a separator."""
    stream.write(str(BigInt(value)))
