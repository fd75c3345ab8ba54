"""Primitives - Field arithmetic and message encoding."""

from primitives.encoding import (
    ENCODINGS,
    Message,
    UnmappedSymbolError,
    ascii_to_number,
    codepoint_to_number,
    encode_message,
    symbol_codes,
)
from primitives.field import (
    FF,
    FIELD_NAMES,
    GOLDILOCKS_PRIME,
    PALLAS_PRIME,
    as_field_element,
    get_field,
)

__all__ = [
    # Field
    "FF",
    "FIELD_NAMES",
    "GOLDILOCKS_PRIME",
    "PALLAS_PRIME",
    "as_field_element",
    "get_field",
    # Encoding
    "ENCODINGS",
    "Message",
    "UnmappedSymbolError",
    "ascii_to_number",
    "codepoint_to_number",
    "encode_message",
    "symbol_codes",
]
