"""Hex quantity helpers for the Ethereum JSON-RPC wire format."""

from __future__ import annotations

import string
from typing import Any

from blockwatch.utils.exceptions import InvalidInputError, ParseError

UINT64_MAX = 2**64 - 1
_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex_uint64(text: Any) -> int:
    """
    Parse a ``0x``-prefixed hex quantity into an unsigned 64-bit integer.

    Raises:
        ParseError: when the value is not a string, the prefix is missing,
            there are no digits, a digit is not hex, or the value overflows.
    """
    if not isinstance(text, str):
        raise ParseError(f"hex quantity must be a string, got {type(text).__name__}", value=text)
    if not text.startswith(("0x", "0X")):
        raise ParseError(f"hex quantity missing 0x prefix: {text!r}", value=text)
    digits = text[2:]
    if not digits:
        raise ParseError("hex quantity has no digits", value=text)
    if any(ch not in _HEX_DIGITS for ch in digits):
        raise ParseError(f"invalid hex quantity: {text!r}", value=text)
    value = int(digits, 16)
    if value > UINT64_MAX:
        raise ParseError(f"hex quantity overflows 64 bits: {text!r}", value=text)
    return value


def to_hex_quantity(value: int) -> str:
    """Encode a block height as a JSON-RPC quantity (``hex(value)``)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"block height must be an integer, got {type(value).__name__}", field="height")
    if value < 0 or value > UINT64_MAX:
        raise InvalidInputError(f"block height out of range: {value}", field="height")
    return hex(value)
