"""Configured univariate extension evaluator.

Binds a field and a symbol encoding once, so callers opening the same
message at many points do not repeat them on every call.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Type

import galois

from extensions.univariate_lagrange import (
    evaluate_at_points,
    evaluate_coefficients,
    evaluate_univariate_extension,
)
from primitives.encoding import ENCODINGS, Message, encode_message
from primitives.field import DEFAULT_FIELD_NAME, as_field_element, get_field


@dataclass
class ExtensionConfig:
    """Univariate extension configuration."""
    field_name: str = DEFAULT_FIELD_NAME  # "goldilocks" or "pallas"
    encoding: str = "ascii"  # "ascii" or "codepoint"

    def __post_init__(self) -> None:
        if self.encoding not in ENCODINGS:
            raise ValueError(f"Unknown encoding: {self.encoding} (expected one of {', '.join(ENCODINGS)})")
        # Resolve eagerly so a bad field name fails at construction
        get_field(self.field_name)

    @property
    def field(self) -> Type[galois.FieldArray]:
        return get_field(self.field_name)


class UnivariateExtension:
    """Evaluates univariate Lagrange extensions of messages under one configuration."""

    def __init__(self, config: Optional[ExtensionConfig] = None):
        self.config = config if config is not None else ExtensionConfig()
        self.field = self.config.field

    def encode(self, message: Message) -> galois.FieldArray:
        """Encode a message as its coefficient vector in the configured field."""
        return encode_message(message, self.field, self.config.encoding)

    def point(self, value) -> galois.FieldArray:
        """Convert an int (modulo p) to an element of the configured field."""
        return as_field_element(value, self.field)

    def evaluate(self, message: Message, r) -> galois.FieldArray:
        """Evaluate the extension of ``message`` at ``r``."""
        return evaluate_univariate_extension(message, self.point(r), self.field, self.config.encoding)

    def evaluate_encoded(self, coefficients: galois.FieldArray, r) -> galois.FieldArray:
        """Evaluate an already encoded coefficient vector at ``r``."""
        return evaluate_coefficients(coefficients, self.point(r))

    def evaluate_many(self, message: Message, points: Iterable) -> galois.FieldArray:
        """Evaluate the extension of ``message`` at every point."""
        return evaluate_at_points(
            message, [self.point(p) for p in points], self.field, self.config.encoding
        )
