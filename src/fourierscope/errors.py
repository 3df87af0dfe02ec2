"""Typed failures raised by the Fourier engine."""

from __future__ import annotations


class FourierScopeError(Exception):
    """Base class for all caller-visible engine failures."""


class ConfigurationError(FourierScopeError, ValueError):
    """Raised when a transform size or run configuration is invalid."""


class LengthMismatchError(FourierScopeError, ValueError):
    """Raised when a signal does not match the engine's transform length."""

    def __init__(self, *, expected: int, actual: int) -> None:
        super().__init__(f"signal length must be {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class ParseError(FourierScopeError, ValueError):
    """Raised when an expression cannot be tokenized or parsed in full."""

    def __init__(self, message: str, *, expression: str, position: int | None = None) -> None:
        location = "end of input" if position is None else f"position {position}"
        super().__init__(f"Invalid function: {message} at {location}")
        self.reason = message
        self.expression = expression
        self.position = position
