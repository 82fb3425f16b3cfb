"""Exception hierarchy shared by the keypad chain modules."""
from __future__ import annotations


class KeypadChainError(ValueError):
    """Base class for failures raised while building or evaluating a chain."""


class KeypadLayoutError(KeypadChainError):
    """Raised when a keypad grid violates the single-gap layout invariants."""


class MalformedCodeError(KeypadChainError):
    """Raised when a code or key string names keys its target keypad lacks."""


class RunShapeError(KeypadChainError):
    """Raised when a directional run is not exactly one push long."""


__all__ = [
    "KeypadChainError",
    "KeypadLayoutError",
    "MalformedCodeError",
    "RunShapeError",
]
