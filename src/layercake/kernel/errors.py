"""Error types raised by layercake hosts."""

from __future__ import annotations


class LayercakeError(Exception):
    """Base class for layercake errors."""


class InvocationError(LayercakeError, TypeError):
    """Error raised when a host is asked to invoke something that is not a component.

    This error preserves the offending target for debugging purposes.
    The usual cause is a continuation invoked where none was supplied.
    """

    def __init__(self, message: str, target: object) -> None:
        self.target = target
        super().__init__(message)

    def __repr__(self) -> str:
        return f"InvocationError({super().__repr__()}, target={self.target!r})"
