"""Prime fields used for message extensions.

Uses galois library for all field arithmetic. FF is the Goldilocks field and
the default everywhere; the Pallas base field (the native field of Mina/o1js
circuits) is built on first use since galois needs a moment to set up a
255-bit prime field.
"""

from typing import Dict, Type

import galois

# --- Field Construction ---

GOLDILOCKS_PRIME = 0xFFFFFFFF00000001

FF = galois.GF(GOLDILOCKS_PRIME)
"""Base field GF(p) - Goldilocks prime field."""

# p = 2^254 + 45560315531419706090280762371685220353
PALLAS_PRIME = 0x40000000000000000000000000000000224698FC094CF91B992D30ED00000001

# Multiplicative generator of the Pallas base field
PALLAS_GENERATOR = 5

DEFAULT_FIELD_NAME = "goldilocks"

# Cache for constructed field classes, keyed by name
_field_cache: Dict[str, Type[galois.FieldArray]] = {"goldilocks": FF}


def _build_pallas() -> Type[galois.FieldArray]:
    # Passing the generator skips the factorisation of p - 1
    return galois.GF(PALLAS_PRIME, primitive_element=PALLAS_GENERATOR, verify=False)


_FIELD_BUILDERS = {
    "goldilocks": lambda: FF,
    "pallas": _build_pallas,
}

FIELD_NAMES = tuple(_FIELD_BUILDERS)


def get_field(name: str = DEFAULT_FIELD_NAME) -> Type[galois.FieldArray]:
    """Return the galois field class registered under ``name``.

    Args:
        name: "goldilocks" or "pallas" (case-insensitive)

    Returns:
        The galois FieldArray subclass for that prime field

    Raises:
        ValueError: If the name is not a known field
    """
    key = name.lower()
    if key not in _FIELD_BUILDERS:
        raise ValueError(f"Unknown field: {name} (expected one of {', '.join(FIELD_NAMES)})")
    if key not in _field_cache:
        _field_cache[key] = _FIELD_BUILDERS[key]()
    return _field_cache[key]


def as_field_element(value, field: Type[galois.FieldArray] = FF) -> galois.FieldArray:
    """Convert an int (reduced modulo the order) or field element to a 0-d element of ``field``.

    Negative ints wrap around, so -1 becomes p - 1.
    """
    if isinstance(value, galois.FieldArray):
        if type(value) is not field:
            raise TypeError(f"Element belongs to {type(value).name}, expected {field.name}")
        return value
    return field(int(value) % field.order)
