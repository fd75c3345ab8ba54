"""Symbol encoding: message symbols to field coefficients.

A message is the data vector of an extension. Each symbol is replaced by its
numeric code, which becomes the value of the polynomial at the symbol's index.

Supported message types:
- str: each character maps to its code point ("ascii" or "codepoint" encoding)
- bytes: each byte maps to its value
- sequence of ints: used as the codes directly
"""

import numbers
from typing import List, Sequence, Type, Union

import galois

ENCODINGS = ("ascii", "codepoint")

ASCII_LIMIT = 128

Message = Union[str, bytes, Sequence[int]]


class UnmappedSymbolError(ValueError):
    """A message symbol has no code in the selected encoding."""


def ascii_to_number(symbol: str) -> int:
    """Return the ASCII code of a single character."""
    if len(symbol) != 1:
        raise UnmappedSymbolError(f"Expected a single character, got {symbol!r}")
    code = ord(symbol)
    if code >= ASCII_LIMIT:
        raise UnmappedSymbolError(f"Symbol {symbol!r} (code {code}) is not ASCII")
    return code


def codepoint_to_number(symbol: str) -> int:
    """Return the Unicode code point of a single character."""
    if len(symbol) != 1:
        raise UnmappedSymbolError(f"Expected a single character, got {symbol!r}")
    return ord(symbol)


def symbol_codes(message: Message, encoding: str = "ascii") -> List[int]:
    """Map every symbol of ``message`` to its integer code.

    Args:
        message: str, bytes or sequence of ints
        encoding: "ascii" or "codepoint"; consulted for str messages and str symbols

    Returns:
        List of codes, one per symbol

    Raises:
        ValueError: If the encoding is unknown
        UnmappedSymbolError: If a symbol has no code
    """
    if encoding not in ENCODINGS:
        raise ValueError(f"Unknown encoding: {encoding} (expected one of {', '.join(ENCODINGS)})")

    to_number = ascii_to_number if encoding == "ascii" else codepoint_to_number

    if isinstance(message, str):
        return [to_number(ch) for ch in message]

    if isinstance(message, (bytes, bytearray)):
        return list(message)

    codes = []
    for idx, code in enumerate(message):
        if isinstance(code, str):
            codes.append(to_number(code))
            continue
        if not isinstance(code, numbers.Integral):
            raise UnmappedSymbolError(f"Code {code!r} at index {idx} is not an integer")
        if code < 0:
            raise UnmappedSymbolError(f"Negative code {code} at index {idx}")
        codes.append(int(code))
    return codes


def encode_message(
    message: Message,
    field: Type[galois.FieldArray],
    encoding: str = "ascii",
) -> galois.FieldArray:
    """Encode a message as a vector of field coefficients.

    Args:
        message: str, bytes or sequence of ints
        field: galois field class the coefficients live in
        encoding: "ascii" or "codepoint"

    Returns:
        1-d field array c with c[i] = code(message[i])

    Raises:
        UnmappedSymbolError: If a symbol cannot be mapped or a code does not fit in the field
    """
    codes = symbol_codes(message, encoding)
    if not codes:
        return field.Zeros(0)
    for idx, code in enumerate(codes):
        if code >= field.order:
            raise UnmappedSymbolError(f"Code {code} at index {idx} does not fit in {field.name}")
    return field(codes)
