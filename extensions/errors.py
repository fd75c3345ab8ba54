"""Errors raised by Lagrange extension evaluation."""


class LagrangeExtensionError(ValueError):
    """Base class for extension evaluation errors."""


class EmptyMessageError(LagrangeExtensionError):
    """The message has no symbols, so there is no polynomial to evaluate."""

    def __init__(self, message: str = "Message cannot be empty.") -> None:
        super().__init__(message)


class InvalidIndexError(LagrangeExtensionError):
    """The basis recurrence was asked for an index it cannot step to."""


class DomainPointError(LagrangeExtensionError):
    """The basis recurrence was called with r inside the interpolating set."""
