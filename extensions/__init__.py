"""Extensions - Low-degree extensions of messages over prime fields."""

from extensions.errors import (
    DomainPointError,
    EmptyMessageError,
    InvalidIndexError,
    LagrangeExtensionError,
)
from extensions.univariate_lagrange import (
    evaluate_at_points,
    evaluate_coefficients,
    evaluate_lagrange_naive,
    evaluate_univariate_extension,
    lagrange_basis_at,
    lagrange_basis_values,
    next_lagrange_basis,
)
from extensions.extension import ExtensionConfig, UnivariateExtension

__all__ = [
    # Errors
    "LagrangeExtensionError",
    "EmptyMessageError",
    "InvalidIndexError",
    "DomainPointError",
    # Univariate Lagrange
    "evaluate_univariate_extension",
    "evaluate_coefficients",
    "evaluate_at_points",
    "evaluate_lagrange_naive",
    "lagrange_basis_at",
    "lagrange_basis_values",
    "next_lagrange_basis",
    # Configured evaluator
    "ExtensionConfig",
    "UnivariateExtension",
]
