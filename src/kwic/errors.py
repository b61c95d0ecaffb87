from __future__ import annotations


class ValidationError(ValueError):
    """Raised when a Token is built from empty or non-alphabetic text."""


class OutOfRange(IndexError):
    """Raised on rank access outside [-size, size-1], or front()/back() of an empty set."""


class InputExhausted(EOFError):
    """Scanner reached end of input before finding a letter. Internal control signal."""
